"""
services/password_generator.py — PASSFORGE
===========================================
Policy-driven password generation.

Each attempt:
  1. coverage — one character from every enabled class's own alphabet
  2. fill     — uniform draws from the combined active alphabet
  3. shuffle  — Fisher–Yates, so coverage characters are not front-loaded
  4. reject   — discard the candidate if it contains a denylisted pattern

All draws go through the injected random source (``secrets`` by default).
"""
from __future__ import annotations

import logging
from typing import List, Optional

from constants import GenerationLimits, WeakPatterns
from core.models import Policy
from exceptions import GenerationExhaustedError
from utils.secure_random import default_source, secure_choice, secure_shuffle

logger = logging.getLogger(__name__)


def find_weak_pattern(candidate: str, denylist=WeakPatterns.DENYLIST) -> Optional[str]:
    """Return the first denylist entry contained in ``candidate`` (case-insensitive)."""
    lowered = candidate.lower()
    for pattern in denylist:
        if pattern in lowered:
            return pattern
    return None


class PasswordGenerator:
    """
    Generates passwords for a Policy.

    Args:
        rng: random source exposing ``randbelow(n)``; defaults to the
            CSPRNG-backed source.
        max_attempts: bound on weak-pattern retries before
            GenerationExhaustedError is raised.
    """

    def __init__(self, rng=None, max_attempts: int = GenerationLimits.MAX_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self.rng = rng if rng is not None else default_source()
        self.max_attempts = max_attempts

    def generate(self, policy: Policy) -> str:
        """
        Produce a password satisfying ``policy``.

        The result has length ``policy.expected_length()`` and contains at
        least one character from every enabled class.

        Raises:
            InvalidPolicyError: before any randomness is consumed.
            GenerationExhaustedError: every attempt hit the denylist.
        """
        policy.validate()

        classes = policy.enabled_classes()
        alphabet = policy.active_alphabet()
        candidate: List[str] = []

        for attempt in range(1, self.max_attempts + 1):
            candidate.clear()
            self._fill_candidate(candidate, classes, alphabet, policy.length)
            password = "".join(candidate)

            hit = find_weak_pattern(password)
            if hit is None:
                if attempt > 1:
                    logger.debug(f"Accepted candidate on attempt {attempt}")
                return password

            logger.debug(f"Attempt {attempt} rejected: contains weak pattern '{hit}'")

        logger.error(f"Password generation exhausted after {self.max_attempts} attempts")
        raise GenerationExhaustedError(
            self.max_attempts,
            detail=f"length={policy.length} classes={[c.value for c in classes]}",
        )

    def generate_many(self, policy: Policy, count: int) -> List[str]:
        """Generate ``count`` independent passwords for the same policy."""
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")
        return [self.generate(policy) for _ in range(count)]

    def _fill_candidate(self, candidate: List[str], classes, alphabet: str, length: int) -> None:
        for cls in classes:
            candidate.append(secure_choice(cls.alphabet, self.rng))

        while len(candidate) < length:
            candidate.append(secure_choice(alphabet, self.rng))

        secure_shuffle(candidate, self.rng)


def generate_password(policy: Policy, rng=None) -> str:
    """Convenience wrapper: one password with the default retry bound."""
    return PasswordGenerator(rng=rng).generate(policy)
