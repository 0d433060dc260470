# -*- coding: utf-8 -*-
"""
utils/password_utils.py
=========================
Pure presentation helpers for strength reports — zero external dependencies.

The scorer decides the tier; these helpers only translate a tier into
what a strength meter shows.
"""
from constants import StrengthTierCode
from core.models import StrengthReport, StrengthTier


def tier_display(tier: StrengthTier) -> tuple:
    """
    Returns (label_key, color_hex, width) for a strength tier.

    VERY_WEAK   → ("password_very_weak",   "#B91C1C", "20%")
    WEAK        → ("password_weak",        "#EF4444", "40%")
    MEDIUM      → ("password_medium",      "#F59E0B", "60%")
    STRONG      → ("password_strong",      "#3B82F6", "80%")
    VERY_STRONG → ("password_very_strong", "#10B981", "100%")
    """
    return (
        f"password_{tier.value}",
        StrengthTierCode.COLORS[tier.value],
        f"{tier.weight}%",
    )


def strength_summary(report: StrengthReport) -> str:
    """One-line summary, e.g. 'Password strength: Strong (Entropy: 64.00 bits)'."""
    return (
        f"Password strength: {report.tier.label} "
        f"(Entropy: {report.entropy_bits:.2f} bits)"
    )
