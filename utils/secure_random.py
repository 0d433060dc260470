# -*- coding: utf-8 -*-
"""
utils/secure_random.py
=======================
Uniform random draws backed by the OS CSPRNG — zero external dependencies.

Every draw the generator makes goes through a "random source": any object
exposing ``randbelow(n) -> int`` returning an integer in ``[0, n)``.
The default source delegates to ``secrets.randbelow``, which uses rejection
sampling over ``os.urandom`` bits, so each index is selected with
probability exactly ``1/n`` (no modulo bias, no float scaling).

Tests inject a scripted source to make generation deterministic.
"""
import secrets
from typing import MutableSequence, Sequence, TypeVar

T = TypeVar("T")


class SecureRandom:
    """Random source backed by :func:`secrets.randbelow`."""

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"upper bound must be positive, got {n}")
        return secrets.randbelow(n)


_default_source = SecureRandom()


def default_source() -> SecureRandom:
    return _default_source


def secure_index(n: int, rng=None) -> int:
    """Return a uniform index in [0, n)."""
    if rng is None:
        rng = _default_source
    return rng.randbelow(n)


def secure_choice(items: Sequence[T], rng=None) -> T:
    """Pick one element of ``items`` uniformly."""
    if not items:
        raise ValueError("cannot choose from an empty sequence")
    return items[secure_index(len(items), rng)]


def secure_shuffle(items: MutableSequence[T], rng=None) -> None:
    """
    Shuffle ``items`` in place with the Fisher–Yates algorithm.

    Walks from the last position down, swapping each slot ``i`` with a
    uniform index in ``[0, i]``. With a uniform source every one of the
    ``n!`` permutations is equally likely.
    """
    for i in range(len(items) - 1, 0, -1):
        j = secure_index(i + 1, rng)
        items[i], items[j] = items[j], items[i]
