# -*- coding: utf-8 -*-
"""
tests/test_facade.py
======================
Tests for services.facade — generate → score in one call.
"""
import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import logging
import pytest

from core.models import Policy, StrengthTier
from exceptions import GenerationExhaustedError, InvalidPolicyError
from services.facade import GenerationResult, generate_batch, generate_with_report
from services.password_generator import PasswordGenerator
from services.strength_scorer import score


class TestGenerateWithReport:

    def test_result_fields(self):
        policy = Policy(length=16)
        result = generate_with_report(policy)
        assert isinstance(result, GenerationResult)
        assert len(result.password) == 16
        assert result.policy is policy
        assert result.report == score(result.password, policy)

    def test_uses_given_generator(self, counter_rng):
        policy = Policy(length=24)
        result = generate_with_report(policy, PasswordGenerator(rng=counter_rng))
        assert result.report.tier == StrengthTier.VERY_STRONG

    def test_invalid_policy_propagates(self):
        policy = Policy(include_upper=False, include_lower=False,
                        include_digits=False, include_symbols=False)
        with pytest.raises(InvalidPolicyError):
            generate_with_report(policy)

    def test_exhausted_propagates(self, scripted):
        letters = [ord(c) - ord("a") for c in "password"]
        rng = scripted(letters + [7, 6, 5, 4, 3, 2, 1], cycle=True)
        policy = Policy(length=8, include_upper=False, include_digits=False,
                        include_symbols=False)
        with pytest.raises(GenerationExhaustedError):
            generate_with_report(policy, PasswordGenerator(rng=rng, max_attempts=2))

    def test_password_never_logged(self, caplog):
        with caplog.at_level(logging.DEBUG):
            result = generate_with_report(Policy())
        assert "Generated password" in caplog.text
        assert result.password not in caplog.text

    def test_to_dict(self, counter_rng):
        result = generate_with_report(Policy(length=12), PasswordGenerator(rng=counter_rng))
        d = result.to_dict()
        assert d["password"] == result.password
        assert d["length"] == 12
        assert d["tier"] == "medium"
        assert d["weight"] == 60
        assert d["entropy_bits"] == 43.02


class TestGenerateBatch:

    def test_count(self):
        results = generate_batch(Policy(), 5)
        assert len(results) == 5
        assert all(len(r.password) == 12 for r in results)

    def test_zero_count_rejected(self):
        with pytest.raises(ValueError):
            generate_batch(Policy(), 0)
