"""
core/models.py — PASSFORGE
===========================
Value types shared by the generator, the scorer and the CLI.

    Policy          ← immutable generation request (length + class flags)
    CharacterClass  ← Upper / Lower / Digit / Symbol with fixed alphabets
    StrengthTier    ← discrete strength level with display weight
    StrengthReport  ← entropy estimate + tier (derived, never stored)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Tuple

from constants import CharacterSets, PolicyLimits, StrengthTierCode, get_label
from exceptions import InvalidPolicyError


class CharacterClass(Enum):
    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    SYMBOL = "symbol"

    @property
    def alphabet(self) -> str:
        return _ALPHABETS[self]


_ALPHABETS = {
    CharacterClass.UPPER: CharacterSets.UPPER,
    CharacterClass.LOWER: CharacterSets.LOWER,
    CharacterClass.DIGIT: CharacterSets.DIGITS,
    CharacterClass.SYMBOL: CharacterSets.SYMBOLS,
}


_TRUE_STRINGS = ("true", "1", "yes", "on")
_FALSE_STRINGS = ("false", "0", "no", "off")


def _coerce_flag(field: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise InvalidPolicyError(f"{field} must be a boolean, got {value!r}", field=field)


def _coerce_length(value: Any) -> Any:
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    # anything else is left for validate() to reject
    return value


@dataclass(frozen=True)
class Policy:
    """
    Composition rules for one generation request.

    Defaults match the generator's initial state: length 12, every
    character class enabled.
    """
    length: int = PolicyLimits.DEFAULT_LENGTH
    include_upper: bool = True
    include_lower: bool = True
    include_digits: bool = True
    include_symbols: bool = True

    # keys accepted by from_mapping() → field name
    _ALIASES = {
        "length": "length",
        "upper": "include_upper",
        "lower": "include_lower",
        "digits": "include_digits",
        "numbers": "include_digits",
        "symbols": "include_symbols",
        "include_upper": "include_upper",
        "include_lower": "include_lower",
        "include_digits": "include_digits",
        "include_symbols": "include_symbols",
    }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Policy":
        """
        Build a policy from loose input (CLI args, JSON, settings).

        Unknown keys are ignored. Missing keys keep their defaults. Flags
        accept bools or the strings true/false, 1/0, yes/no, on/off; a
        digit string is accepted for the length.

        Raises:
            InvalidPolicyError: a flag value is not a recognised boolean.
        """
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            field = cls._ALIASES.get(key)
            if field is None or value is None:
                continue
            if field == "length":
                kwargs[field] = _coerce_length(value)
            else:
                kwargs[field] = _coerce_flag(field, value)
        return cls(**kwargs)

    def enabled_classes(self) -> Tuple[CharacterClass, ...]:
        """Enabled classes in the fixed order Upper, Lower, Digit, Symbol."""
        flags = (
            (CharacterClass.UPPER, self.include_upper),
            (CharacterClass.LOWER, self.include_lower),
            (CharacterClass.DIGIT, self.include_digits),
            (CharacterClass.SYMBOL, self.include_symbols),
        )
        return tuple(cls for cls, enabled in flags if enabled)

    def active_alphabet(self) -> str:
        return "".join(cls.alphabet for cls in self.enabled_classes())

    def expected_length(self) -> int:
        """
        Length of every password generated from this policy.

        The coverage step adds one character per enabled class, so the
        result is never shorter than the class count.
        """
        return max(self.length, len(self.enabled_classes()))

    def all_classes_enabled(self) -> bool:
        return len(self.enabled_classes()) == len(CharacterClass)

    def validate(self) -> None:
        """
        Raise InvalidPolicyError unless the policy can be generated from.

        Raises:
            InvalidPolicyError: no class enabled, or length not an integer
                in [MIN_LENGTH, MAX_LENGTH].
        """
        if not self.enabled_classes():
            raise InvalidPolicyError(
                "at least one character class must be enabled",
                field="include_*",
            )

        for name in ("include_upper", "include_lower", "include_digits", "include_symbols"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidPolicyError(
                    f"{name} must be a boolean, got {type(value).__name__}",
                    field=name,
                )

        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise InvalidPolicyError(
                f"length must be an integer, got {type(self.length).__name__}",
                field="length",
            )

        if not PolicyLimits.MIN_LENGTH <= self.length <= PolicyLimits.MAX_LENGTH:
            raise InvalidPolicyError(
                f"length must be between {PolicyLimits.MIN_LENGTH} and "
                f"{PolicyLimits.MAX_LENGTH}, got {self.length}",
                field="length",
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "length": self.length,
            "include_upper": self.include_upper,
            "include_lower": self.include_lower,
            "include_digits": self.include_digits,
            "include_symbols": self.include_symbols,
        }


class StrengthTier(Enum):
    VERY_WEAK = StrengthTierCode.VERY_WEAK
    WEAK = StrengthTierCode.WEAK
    MEDIUM = StrengthTierCode.MEDIUM
    STRONG = StrengthTierCode.STRONG
    VERY_STRONG = StrengthTierCode.VERY_STRONG

    @property
    def weight(self) -> int:
        """Progress-bar weight in percent (20/40/60/80/100)."""
        return StrengthTierCode.WEIGHTS[self.value]

    @property
    def label(self) -> str:
        return get_label(StrengthTierCode, self.value)


@dataclass(frozen=True)
class StrengthReport:
    entropy_bits: float
    tier: StrengthTier

    @property
    def weight(self) -> int:
        return self.tier.weight

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entropy_bits": round(self.entropy_bits, 2),
            "tier": self.tier.value,
            "weight": self.weight,
        }
