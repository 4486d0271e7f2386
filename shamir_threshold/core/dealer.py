"""Config-driven front end to the sharing engine.

Binds one field type, one randomness source and the configured share
counts so callers can split plain ints without repeating parameters.
"""

from __future__ import annotations

from typing import Generic, Sequence

import structlog

from shamir_threshold.config import Config
from shamir_threshold.core.sharing import F, SecretShare, generate_shares, reveal_secret
from shamir_threshold.errors import InsufficientSharesError
from shamir_threshold.field.base import RandomSource

log = structlog.get_logger()


class ShareDealer(Generic[F]):
    """Splits and combines secrets in one field with configured defaults."""

    def __init__(self, field: type[F], rng: RandomSource, config: Config | None = None) -> None:
        self._field = field
        self._rng = rng
        self._config = config or Config()
        self._config.validate()

    @property
    def field(self) -> type[F]:
        return self._field

    @property
    def config(self) -> Config:
        return self._config

    def split(self, secret: int | F, k: int | None = None, n: int | None = None) -> list[SecretShare[F]]:
        """Split ``secret`` into shares; k and n default to the configured values."""
        if isinstance(secret, int):
            secret = self._field(secret)
        elif not isinstance(secret, self._field):
            raise TypeError(f"Expected int or {self._field.__name__}, got {type(secret).__name__}")
        k = self._config.shares_threshold if k is None else k
        n = self._config.shares_total if n is None else n
        shares = generate_shares(
            secret, k, n, self._rng, retry_limit=self._config.coefficient_retry_limit
        )
        log.info("secret_split", field=self._field.__name__, threshold=k, total=n)
        return shares

    def combine(self, shares: Sequence[SecretShare[F]]) -> F:
        """Interpolate the secret from whatever shares are given."""
        return reveal_secret(shares).value

    def combine_checked(self, shares: Sequence[SecretShare[F]]) -> F:
        """Like combine, but refuse to run below the configured threshold."""
        required = self._config.shares_threshold
        if len(shares) < required:
            log.warning("insufficient_shares", required=required, supplied=len(shares))
            raise InsufficientSharesError(required, len(shares))
        return self.combine(shares)
