"""(k, n)-threshold Shamir secret sharing over finite fields."""

__version__ = "0.1.0"

from shamir_threshold.core.dealer import ShareDealer
from shamir_threshold.core.sharing import Secret, SecretShare, generate_shares, reveal_secret
from shamir_threshold.errors import (
    DuplicateShareIndexError,
    EmptyShareSetError,
    InsufficientDistinctCoefficientsError,
    InsufficientSharesError,
    ShamirError,
    ZeroShareIndexError,
)
from shamir_threshold.field import (
    BN254,
    BN254_PRIME,
    G1613,
    FieldElement,
    PrimeFieldElement,
    RandomSource,
    extended_euclid,
    prime_field,
)

__all__ = [
    "BN254",
    "BN254_PRIME",
    "G1613",
    "DuplicateShareIndexError",
    "EmptyShareSetError",
    "FieldElement",
    "InsufficientDistinctCoefficientsError",
    "InsufficientSharesError",
    "PrimeFieldElement",
    "RandomSource",
    "Secret",
    "SecretShare",
    "ShamirError",
    "ShareDealer",
    "ZeroShareIndexError",
    "__version__",
    "extended_euclid",
    "generate_shares",
    "reveal_secret",
]
