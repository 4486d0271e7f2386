"""Prime-order fields GF(p).

Elements are stored as their canonical representative in [0, p). A concrete
field is a ``PrimeFieldElement`` subclass with the modulus bound to ``P``;
build one with ``prime_field()``.

G1613 is a demonstration field only. Its order is far too small to protect
anything: use BN254 (or another large prime) for real secrets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeVar

from shamir_threshold.field.base import RandomSource

# BN254 scalar field prime
BN254_PRIME = 21888242871839275222246405745257275088548364400416034343698204186575808495617

E = TypeVar("E", bound="PrimeFieldElement")


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def extended_euclid(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(gcd, s, t)`` with ``a*s + b*t == gcd``.

    The coefficients are returned as computed, without reduction.
    """
    if b == 0:
        raise ValueError("extended_euclid requires b != 0")
    s, s_next = 1, 0
    t, t_next = 0, 1
    while True:
        quotient = _trunc_div(a, b)
        rest = a - quotient * b
        if rest == 0:
            return b, s_next, t_next
        a, b = b, rest
        s, s_next = s_next, s - quotient * s_next
        t, t_next = t_next, t - quotient * t_next


@dataclass(frozen=True)
class PrimeFieldElement:
    """An element of GF(P). Any int is accepted and reduced modulo P."""

    value: int
    P: ClassVar[int] = 0

    def __post_init__(self) -> None:
        if self.P < 2:
            raise TypeError(f"{type(self).__name__} has no modulus; build a field with prime_field()")
        object.__setattr__(self, "value", self.value % self.P)

    @classmethod
    def zero(cls: type[E]) -> E:
        return cls(0)

    @classmethod
    def one(cls: type[E]) -> E:
        return cls(1)

    @classmethod
    def random(cls: type[E], rng: RandomSource) -> E:
        """Uniform element drawn from ``rng``."""
        return cls(rng.randrange(cls.P))

    def _check(self, other: object) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}"
            )

    def add(self: E, other: E) -> E:
        self._check(other)
        return type(self)((self.value + other.value) % self.P)

    def subtract(self: E, other: E) -> E:
        self._check(other)
        return type(self)((self.value + other.negative().value) % self.P)

    def multiply(self: E, other: E) -> E:
        self._check(other)
        return type(self)((self.value * other.value) % self.P)

    def negative(self: E) -> E:
        if self.value == 0:
            return type(self)(0)
        return type(self)(self.P - self.value)

    def inverse(self: E) -> E | None:
        """Multiplicative inverse, or None for zero."""
        if self.value == 0:
            return None
        gcd, _, t = extended_euclid(self.P, self.value)
        if gcd != 1:
            # Only reachable when P is not actually prime.
            return None
        return type(self)(t % self.P)

    def to_pow(self: E, exponent: int) -> E:
        """Binary exponentiation: O(log exponent) multiplications."""
        if exponent < 0:
            raise ValueError(f"Exponent must be >= 0, got {exponent}")
        base = self.value
        result = 1
        while exponent > 0:
            if exponent & 1:
                result = (result * base) % self.P
            exponent >>= 1
            base = (base * base) % self.P
        return type(self)(result)

    def mul_by_scalar(self: E, scalar: int) -> E:
        if scalar < 0:
            raise ValueError(f"Scalar must be >= 0, got {scalar}")
        return type(self)((self.value * scalar) % self.P)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __neg__ = negative
    __pow__ = to_pow

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"


def prime_field(p: int, name: str | None = None) -> type[PrimeFieldElement]:
    """Build the element type for GF(p).

    ``p`` is trusted to be prime; a composite modulus still yields a ring
    whose non-units simply have no inverse.
    """
    if p < 2:
        raise ValueError(f"Field modulus must be >= 2, got {p}")
    return type(name or f"GF{p}", (PrimeFieldElement,), {"P": p, "__module__": __name__})


G1613 = prime_field(1613, "G1613")
BN254 = prime_field(BN254_PRIME, "BN254")
