"""Values that may carry an absolute expiration time."""

from __future__ import annotations

from abc import ABC, abstractmethod

NEVER_EXPIRES = 2**64 - 1
"""Expiration time reported for values that never expire (the largest u64)."""


class Expirable(ABC):
    """Something with an optional absolute expiration time in Unix milliseconds."""

    @abstractmethod
    def expires_at_ms_opt(self) -> int | None:
        """Return the expiration time in milliseconds since the epoch, or None."""

    def expires_at_ms(self) -> int:
        """Return the expiration time, or ``NEVER_EXPIRES`` if none is set."""
        expires = self.expires_at_ms_opt()
        return NEVER_EXPIRES if expires is None else expires


def expires_at_ms_opt(expirable: Expirable | None) -> int | None:
    """Return the expiration time of an optional expirable, or None."""
    if expirable is None:
        return None
    return expirable.expires_at_ms_opt()


def expires_at_ms(expirable: Expirable | None) -> int:
    """Return the expiration time of an optional expirable, or ``NEVER_EXPIRES``."""
    expires = expires_at_ms_opt(expirable)
    return NEVER_EXPIRES if expires is None else expires