"""Finite-field capability set and concrete prime fields."""

from shamir_threshold.field.base import FieldElement, RandomSource
from shamir_threshold.field.prime import (
    BN254,
    BN254_PRIME,
    G1613,
    PrimeFieldElement,
    extended_euclid,
    prime_field,
)

__all__ = [
    "BN254",
    "BN254_PRIME",
    "G1613",
    "FieldElement",
    "PrimeFieldElement",
    "RandomSource",
    "extended_euclid",
    "prime_field",
]
