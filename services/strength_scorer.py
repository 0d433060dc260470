"""
services/strength_scorer.py — PASSFORGE
========================================
Entropy heuristic and tier classification for generated passwords.

Entropy here is ``log2(k ** L)`` where ``L`` is the password length and
``k`` the number of *distinct* characters in it. This is a per-character
uniqueness proxy, not an information-theoretic estimate; it understates
passwords with repeated characters and is not a cryptographic guarantee.
"""
from __future__ import annotations

import math

from core.models import Policy, StrengthReport, StrengthTier


def calculate_entropy(password: str) -> float:
    """Return ``len(password) * log2(distinct chars)``; 0.0 for empty input."""
    if not password:
        return 0.0
    distinct = len(set(password))
    return len(password) * math.log2(distinct)


def classify(entropy: float, length: int, policy: Policy) -> StrengthTier:
    """
    Map entropy, requested length and policy flags to a tier.

    Rules are checked strongest first; the first match wins.
    """
    all_classes = (
        policy.include_upper
        and policy.include_lower
        and policy.include_digits
        and policy.include_symbols
    )
    has_letters = policy.include_upper or policy.include_lower
    has_non_letters = policy.include_digits or policy.include_symbols

    if entropy > 80 and length >= 12 and all_classes:
        return StrengthTier.VERY_STRONG
    if entropy > 60 and length >= 10 and has_non_letters and has_letters:
        return StrengthTier.STRONG
    if entropy > 40 and length >= 8:
        return StrengthTier.MEDIUM
    if entropy > 20:
        return StrengthTier.WEAK
    return StrengthTier.VERY_WEAK


def score(password: str, policy: Policy) -> StrengthReport:
    """
    Score ``password`` as generated under ``policy``.

    The length thresholds apply to the length the policy asked for, not
    to the password. Pure and total: never raises, identical input gives
    an identical report.
    """
    entropy = calculate_entropy(password or "")
    length = policy.length
    if isinstance(length, bool) or not isinstance(length, int):
        length = 0
    return StrengthReport(
        entropy_bits=entropy,
        tier=classify(entropy, length, policy),
    )
