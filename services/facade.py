from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import logging

# -----------------------------------------------------------------------------
# Logging
logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
from core.models import Policy, StrengthReport
from .password_generator import PasswordGenerator
from .strength_scorer import score


@dataclass(frozen=True)
class GenerationResult:
    password: str
    report: StrengthReport
    policy: Policy

    def to_dict(self) -> dict:
        data = {"password": self.password, "length": len(self.password)}
        data.update(self.report.to_dict())
        return data


def generate_with_report(
    policy: Policy,
    generator: Optional[PasswordGenerator] = None,
) -> GenerationResult:
    """
    Generate one password for ``policy`` and score it.

    InvalidPolicyError and GenerationExhaustedError propagate unchanged.
    """
    generator = generator or PasswordGenerator()
    password = generator.generate(policy)
    report = score(password, policy)

    # never log the password itself
    logger.info(
        f"Generated password: length={len(password)} "
        f"tier={report.tier.value} entropy={report.entropy_bits:.2f}"
    )
    return GenerationResult(password=password, report=report, policy=policy)


def generate_batch(
    policy: Policy,
    count: int,
    generator: Optional[PasswordGenerator] = None,
) -> List[GenerationResult]:
    """Generate and score ``count`` independent passwords."""
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    generator = generator or PasswordGenerator()
    return [generate_with_report(policy, generator) for _ in range(count)]
