"""Exceptions raised by the sharing engine.

Field-level division by zero is not an exception: ``inverse()`` returns
None. These cover misuse of the sharing operations themselves.
"""

from __future__ import annotations

from typing import Any


class ShamirError(Exception):
    """Base class for secret sharing failures."""


class DuplicateShareIndexError(ShamirError, ValueError):
    """Two shares handed to reconstruction carry the same index."""

    def __init__(self, index: Any) -> None:
        self.index = index
        super().__init__(f"Duplicate share index {index}: every share must have a distinct index")


class ZeroShareIndexError(ShamirError, ValueError):
    """A share claims index zero, which is where the secret itself lives."""

    def __init__(self) -> None:
        super().__init__("Share index 0 is reserved for the secret and cannot be a share")


class EmptyShareSetError(ShamirError, ValueError):
    """Reconstruction was called without any shares."""

    def __init__(self) -> None:
        super().__init__("At least one share is required to reveal a secret")


class InsufficientSharesError(ShamirError, ValueError):
    """Fewer shares than the configured threshold were supplied."""

    def __init__(self, required: int, supplied: int) -> None:
        self.required = required
        self.supplied = supplied
        super().__init__(f"Need at least {required} shares, got {supplied}")


class InsufficientDistinctCoefficientsError(ShamirError):
    """The coefficient sampler kept drawing values it had already accepted.

    Happens when the field has too few elements for the requested threshold.
    """

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(
            f"Could not draw a distinct polynomial coefficient after {attempts} attempts; "
            "the field is too small for this threshold"
        )
