"""Shamir (k, n)-threshold secret sharing over any field.

A secret s becomes the constant term of a random polynomial
f(x) = s + c_1*x + ... + c_{k-1}*x^(k-1). Share i is (i, f(i)) for
i = 1..n, and any k shares recover s = f(0) by Lagrange interpolation.

Everything here goes through the FieldElement protocol, so the same code
runs over G1613, BN254 or a caller-supplied field. Secret values,
coefficients and share values are never logged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

import structlog

from shamir_threshold.errors import (
    DuplicateShareIndexError,
    EmptyShareSetError,
    InsufficientDistinctCoefficientsError,
    ZeroShareIndexError,
)
from shamir_threshold.field.base import FieldElement, RandomSource

log = structlog.get_logger()

F = TypeVar("F", bound=FieldElement)

DEFAULT_RETRY_LIMIT = 64


@dataclass(frozen=True)
class SecretShare(Generic[F]):
    """One evaluation (index, f(index)) of the secret polynomial."""

    index: F
    value: F


@dataclass(frozen=True)
class Secret(Generic[F]):
    """The protected value: f(0)."""

    value: F

    def generate_shares(
        self,
        k: int,
        n: int,
        rng: RandomSource,
        *,
        retry_limit: int = DEFAULT_RETRY_LIMIT,
    ) -> list[SecretShare[F]]:
        return generate_shares(self, k, n, rng, retry_limit=retry_limit)


def _sample_distinct_coefficients(
    field: type[F],
    count: int,
    rng: RandomSource,
    retry_limit: int,
) -> list[F]:
    """Draw ``count`` pairwise-distinct random field elements.

    Each position is redrawn on collision, at most ``retry_limit`` times.
    """
    coefficients: list[F] = []
    while len(coefficients) < count:
        for attempt in range(1, retry_limit + 1):
            candidate = field.random(rng)
            if candidate not in coefficients:
                coefficients.append(candidate)
                break
            log.debug("coefficient_collision", position=len(coefficients) + 1, attempt=attempt)
        else:
            log.warning(
                "coefficient_sampling_exhausted",
                position=len(coefficients) + 1,
                required=count,
                retry_limit=retry_limit,
            )
            raise InsufficientDistinctCoefficientsError(retry_limit)
    return coefficients


def generate_shares(
    secret: Secret[F] | F,
    k: int,
    n: int,
    rng: RandomSource,
    *,
    retry_limit: int = DEFAULT_RETRY_LIMIT,
) -> list[SecretShare[F]]:
    """Split a secret into n shares, any k of which reconstruct it.

    Args:
        secret: The secret, as a Secret or a bare field element.
        k: Threshold (polynomial degree + 1).
        n: Number of shares to issue.
        rng: Randomness source for the polynomial coefficients.
        retry_limit: Collisions tolerated per coefficient before giving up.

    Returns:
        Shares with indices 1..n (as field elements), in order.
    """
    if k < 1:
        raise ValueError(f"Threshold k must be >= 1, got {k}")
    if n < k:
        raise ValueError(f"Share count n must be >= threshold k, got n={n}, k={k}")
    if retry_limit < 1:
        raise ValueError(f"retry_limit must be >= 1, got {retry_limit}")

    value = secret.value if isinstance(secret, Secret) else secret
    field = type(value)
    coefficients = _sample_distinct_coefficients(field, k - 1, rng, retry_limit)

    one = field.one()
    zero = field.zero()
    shares: list[SecretShare[F]] = []
    for i in range(1, n + 1):
        x = one.mul_by_scalar(i)
        if x == zero:
            raise ValueError(f"n={n} reaches the order of {field.__name__}; share index {i} wraps to zero")
        y = value
        for power, coefficient in enumerate(coefficients, start=1):
            y = y.add(coefficient.multiply(x.to_pow(power)))
        shares.append(SecretShare(index=x, value=y))

    log.debug("shares_generated", field=field.__name__, threshold=k, total=n)
    return shares


def reveal_secret(shares: Sequence[SecretShare[F]]) -> Secret[F]:
    """Reconstruct f(0) from shares by Lagrange interpolation.

    Any k or more shares of one sharing give back the secret. Fewer than k
    still interpolate to some field element, which is generally not the
    secret.

    Raises:
        EmptyShareSetError: ``shares`` is empty.
        ZeroShareIndexError: a share has index zero.
        DuplicateShareIndexError: two shares have the same index.
    """
    if not shares:
        raise EmptyShareSetError()

    zero = shares[0].index.zero()
    if any(share.index == zero for share in shares):
        log.warning("zero_share_index", count=len(shares))
        raise ZeroShareIndexError()

    total = zero
    for i, share in enumerate(shares):
        x_i = share.index
        basis = x_i.one()
        for j, other in enumerate(shares):
            if j == i:
                continue
            # L_i(0) = prod x_j / (x_j - x_i)
            denominator = other.index.subtract(x_i).inverse()
            if denominator is None:
                log.warning("duplicate_share_index", index=str(x_i), count=len(shares))
                raise DuplicateShareIndexError(x_i)
            basis = basis.multiply(other.index.multiply(denominator))
        total = total.add(share.value.multiply(basis))

    log.debug("secret_revealed", shares=len(shares))
    return Secret(total)
