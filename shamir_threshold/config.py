"""Sharing defaults loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _int_env(key: str, default: str) -> int:
    val = os.getenv(key, default)
    try:
        return int(val)
    except (ValueError, TypeError, OverflowError):
        raise ValueError(f"Invalid integer for {key}: {val!r}")


@dataclass(frozen=True)
class Config:
    # Shares issued per secret and how many reconstruct it
    shares_total: int = _int_env("SHAMIR_SHARES_TOTAL", "10")
    shares_threshold: int = _int_env("SHAMIR_SHARES_THRESHOLD", "5")

    # Consecutive collisions tolerated while drawing one polynomial coefficient
    coefficient_retry_limit: int = _int_env("SHAMIR_COEFFICIENT_RETRY_LIMIT", "64")

    def validate(self, *, strict: bool = False) -> list[str]:
        """Validate settings. Raises ValueError on hard errors, returns warnings.

        Args:
            strict: If True, raise ValueError on any warning as well.
        """
        warnings: list[str] = []
        if self.shares_threshold < 1:
            raise ValueError(f"SHAMIR_SHARES_THRESHOLD must be >= 1, got {self.shares_threshold}")
        if self.shares_total < self.shares_threshold:
            raise ValueError(
                f"SHAMIR_SHARES_TOTAL ({self.shares_total}) must be >= "
                f"SHAMIR_SHARES_THRESHOLD ({self.shares_threshold})"
            )
        if self.coefficient_retry_limit < 1:
            raise ValueError(
                f"SHAMIR_COEFFICIENT_RETRY_LIMIT must be >= 1, got {self.coefficient_retry_limit}"
            )
        if self.shares_threshold == 1:
            warnings.append("SHAMIR_SHARES_THRESHOLD=1 puts the secret itself in every share")
        if strict and warnings:
            raise ValueError("Config validation failed in strict mode:\n" + "\n".join(f"  - {w}" for w in warnings))
        return warnings
