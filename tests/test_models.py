# -*- coding: utf-8 -*-
"""
tests/test_models.py
======================
Tests for core.models — Policy validation and character classes.
"""
import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import dataclasses
import pytest

from constants import CharacterSets, PolicyLimits
from core.models import CharacterClass, Policy, StrengthTier
from exceptions import InvalidPolicyError, ValidationError


class TestCharacterClass:

    @pytest.mark.parametrize("cls, size", [
        (CharacterClass.UPPER,  26),
        (CharacterClass.LOWER,  26),
        (CharacterClass.DIGIT,  10),
        (CharacterClass.SYMBOL, 20),
    ])
    def test_alphabet_sizes(self, cls, size):
        assert len(cls.alphabet) == size
        assert len(set(cls.alphabet)) == size

    def test_alphabets_disjoint(self):
        seen = set()
        for cls in CharacterClass:
            assert not seen & set(cls.alphabet)
            seen |= set(cls.alphabet)

    def test_symbols_printable_ascii(self):
        assert all(c.isascii() and c.isprintable() and not c.isalnum()
                   for c in CharacterSets.SYMBOLS)


class TestPolicy:

    def test_defaults(self):
        p = Policy()
        assert p.length == PolicyLimits.DEFAULT_LENGTH == 12
        assert p.all_classes_enabled()

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Policy().length = 20

    def test_enabled_classes_fixed_order(self):
        p = Policy(include_lower=False)
        assert p.enabled_classes() == (
            CharacterClass.UPPER, CharacterClass.DIGIT, CharacterClass.SYMBOL,
        )

    def test_active_alphabet_concatenation(self):
        p = Policy(include_upper=False, include_symbols=False)
        assert p.active_alphabet() == CharacterSets.LOWER + CharacterSets.DIGITS

    def test_expected_length_never_below_class_count(self):
        assert Policy(length=12).expected_length() == 12
        assert Policy(length=2).expected_length() == 4
        assert Policy(length=2, include_upper=False).expected_length() == 3

    @pytest.mark.parametrize("length", [8, 12, 50])
    def test_valid_lengths(self, length):
        Policy(length=length).validate()

    @pytest.mark.parametrize("length", [7, 51, -1])
    def test_invalid_lengths(self, length):
        with pytest.raises(InvalidPolicyError) as exc_info:
            Policy(length=length).validate()
        assert exc_info.value.field == "length"

    @pytest.mark.parametrize("length", ["12", 12.0, True, None])
    def test_non_integer_length(self, length):
        with pytest.raises(InvalidPolicyError):
            Policy(length=length).validate()

    def test_no_classes_rejected(self):
        p = Policy(include_upper=False, include_lower=False,
                   include_digits=False, include_symbols=False)
        with pytest.raises(InvalidPolicyError) as exc_info:
            p.validate()
        assert isinstance(exc_info.value, ValidationError)
        assert exc_info.value.code == "POLICY_INVALID"
        assert "character class" in str(exc_info.value)

    def test_from_mapping_short_keys(self):
        p = Policy.from_mapping({"length": 20, "upper": False, "numbers": False, "color": "x"})
        assert p == Policy(length=20, include_upper=False, include_digits=False)

    def test_from_mapping_long_keys_and_none(self):
        p = Policy.from_mapping({"include_symbols": False, "length": None})
        assert p == Policy(include_symbols=False)

    @pytest.mark.parametrize("raw, expected", [
        ("false", False), ("False", False), ("0", False), ("off", False), ("no", False),
        ("true", True), ("1", True), (" YES ", True), ("on", True),
    ])
    def test_from_mapping_string_flags(self, raw, expected):
        p = Policy.from_mapping({"upper": raw})
        assert p.include_upper is expected

    @pytest.mark.parametrize("raw", ["maybe", "", 1, 0, [True]])
    def test_from_mapping_rejects_unreadable_flags(self, raw):
        with pytest.raises(InvalidPolicyError) as exc_info:
            Policy.from_mapping({"symbols": raw})
        assert exc_info.value.field == "include_symbols"

    def test_from_mapping_length_string(self):
        assert Policy.from_mapping({"length": " 20 "}).length == 20
        with pytest.raises(InvalidPolicyError):
            Policy.from_mapping({"length": "twenty"}).validate()

    @pytest.mark.parametrize("flag", ["include_upper", "include_lower",
                                      "include_digits", "include_symbols"])
    def test_non_bool_flag_rejected(self, flag):
        with pytest.raises(InvalidPolicyError) as exc_info:
            Policy(**{flag: "false"}).validate()
        assert exc_info.value.field == flag

    def test_to_dict_round_trip(self):
        p = Policy(length=30, include_lower=False)
        assert Policy.from_mapping(p.to_dict()) == p


class TestStrengthTier:

    def test_weights_increase(self):
        weights = [t.weight for t in StrengthTier]
        assert weights == [20, 40, 60, 80, 100]

    def test_labels(self):
        assert StrengthTier.VERY_STRONG.label == "Very Strong"
        assert StrengthTier.WEAK.label == "Weak"
