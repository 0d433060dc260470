"""
PASSFORGE Constants - Single Source of Truth
============================================

Character sets, policy limits and the weak-pattern denylist used across
the application. Using constants instead of literals keeps the generator,
the scorer and the CLI in agreement.
"""


class CharacterSets:
    """
    Fixed, disjoint alphabets for each character class.

    Usage:
        from constants import CharacterSets as CS
        pool = CS.UPPER + CS.DIGITS
    """
    UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    LOWER = "abcdefghijklmnopqrstuvwxyz"
    DIGITS = "0123456789"
    SYMBOLS = "!@#$%^&*()-_=+[]{}|;"   # 20 printable ASCII symbols


class PolicyLimits:
    """Bounds and defaults for a password policy"""
    MIN_LENGTH = 8
    MAX_LENGTH = 50
    DEFAULT_LENGTH = 12


class GenerationLimits:
    """Retry bound for the weak-pattern rejection loop"""
    MAX_ATTEMPTS = 1000


class WeakPatterns:
    """Common password fragments a generated password must never contain"""
    DENYLIST = (
        "password",
        "123456",
        "qwerty",
        "abc123",
        "letmein",
        "admin",
        "welcome",
        "monkey",
        "dragon",
        "baseball",
        "football",
    )


class StrengthTierCode:
    """Strength tier values (ordered weakest → strongest)"""
    VERY_WEAK = "very_weak"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very_strong"

    CHOICES = [VERY_WEAK, WEAK, MEDIUM, STRONG, VERY_STRONG]

    LABELS = {
        VERY_WEAK: {"en": "Very Weak"},
        WEAK: {"en": "Weak"},
        MEDIUM: {"en": "Medium"},
        STRONG: {"en": "Strong"},
        VERY_STRONG: {"en": "Very Strong"},
    }

    # Progress-bar weight in percent
    WEIGHTS = {
        VERY_WEAK: 20,
        WEAK: 40,
        MEDIUM: 60,
        STRONG: 80,
        VERY_STRONG: 100,
    }

    COLORS = {
        VERY_WEAK: "#B91C1C",
        WEAK: "#EF4444",
        MEDIUM: "#F59E0B",
        STRONG: "#3B82F6",
        VERY_STRONG: "#10B981",
    }


class ExitCodes:
    """Process exit codes used by the command line entry point"""
    OK = 0
    INVALID_POLICY = 2
    GENERATION_EXHAUSTED = 3
    CONFIG_ERROR = 4


def get_label(enum_class, value: str, lang: str = "en") -> str:
    """
    Get display label for enum value

    Usage:
        label = get_label(StrengthTierCode, "very_strong")  # "Very Strong"
    """
    if hasattr(enum_class, 'LABELS'):
        labels = getattr(enum_class, 'LABELS')
        if value in labels:
            return labels[value].get(lang, value)
    return value
