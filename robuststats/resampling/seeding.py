"""Seed policies governing how the resampler's generator is (re)seeded.

A policy is resolved once per public entry point and never changes during the
call it governs.

- ``FixedSeed(s)``: reseed with ``s`` before drawing (deterministic).
- ``DefaultSeed()``: reseed with the documented default, ``Config.DEFAULT_SEED``.
- ``NoReseed()``: draw from the generator's current state.

Public entry points also accept the loose forms ``int`` (fixed seed),
``True`` (default seed) and ``False`` / ``None`` (no reseed).

Examples
--------
>>> from robuststats.resampling.seeding import resolve_seed_policy, FixedSeed
>>> resolve_seed_policy(7) == FixedSeed(7)
True
>>> resolve_seed_policy(True).seed
2
>>> resolve_seed_policy(None).seed is None
True
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Optional, Union

from robuststats.config import Config


@dataclass(frozen=True)
class FixedSeed:
    """Reseed with an explicit integer before drawing."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, Integral):
            raise TypeError(f"FixedSeed requires an integer, got {self.value!r}")
        if self.value < 0:
            raise ValueError(f"Seed must be non-negative, got {self.value}")
        object.__setattr__(self, "value", int(self.value))

    @property
    def seed(self) -> Optional[int]:
        return self.value


@dataclass(frozen=True)
class DefaultSeed:
    """Reseed with the package's documented default seed."""

    @property
    def seed(self) -> Optional[int]:
        return Config.DEFAULT_SEED


@dataclass(frozen=True)
class NoReseed:
    """Leave the generator state untouched."""

    @property
    def seed(self) -> Optional[int]:
        return None


SeedPolicy = Union[FixedSeed, DefaultSeed, NoReseed]
SeedLike = Union[SeedPolicy, int, bool, None]


def resolve_seed_policy(seed: SeedLike) -> SeedPolicy:
    """Map any accepted seed argument to a concrete :data:`SeedPolicy`.

    Raises
    ------
    TypeError
        If ``seed`` is not a policy, an integer, a boolean, or None.
    """

    if isinstance(seed, (FixedSeed, DefaultSeed, NoReseed)):
        return seed
    if seed is None:
        return NoReseed()
    if isinstance(seed, bool):
        return DefaultSeed() if seed else NoReseed()
    if isinstance(seed, Integral):
        return FixedSeed(int(seed))
    raise TypeError(f"seed must be an int, a bool, None, or a SeedPolicy; got {type(seed).__name__}")
