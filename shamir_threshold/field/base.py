"""Capability set required of any field element type.

The sharing engine only talks to field elements through this protocol, so
any type that provides these members can be plugged in without inheriting
from anything here. The shipped prime fields live in ``prime.py``.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

F = TypeVar("F", bound="FieldElement")


@runtime_checkable
class RandomSource(Protocol):
    """Randomness capability: ``random.Random`` and ``secrets.SystemRandom`` both fit."""

    def randrange(self, stop: int) -> int: ...


@runtime_checkable
class FieldElement(Protocol):
    """A member of a finite field.

    ``inverse`` returns ``None`` for zero rather than raising, so callers
    decide how to treat division by zero.
    """

    @classmethod
    def zero(cls: type[F]) -> F: ...

    @classmethod
    def one(cls: type[F]) -> F: ...

    @classmethod
    def random(cls: type[F], rng: RandomSource) -> F: ...

    def add(self: F, other: F) -> F: ...

    def subtract(self: F, other: F) -> F: ...

    def multiply(self: F, other: F) -> F: ...

    def negative(self: F) -> F: ...

    def inverse(self: F) -> F | None: ...

    def to_pow(self: F, exponent: int) -> F: ...

    def mul_by_scalar(self: F, scalar: int) -> F: ...
