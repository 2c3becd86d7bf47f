"""Application-level interface for sequence-numbered values with metadata."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from seqmarked import expirable as _expirable


class SeqValue(ABC):
    """A value bound to a sequence number and optional metadata.

    Unlike a tombstone-aware internal record, this has no deletion marker:
    an absent value is reported with ``value()`` returning None.
    """

    @abstractmethod
    def seq(self) -> int:
        """Return the sequence number."""

    @abstractmethod
    def value(self) -> Any | None:
        """Return the value, or None if there is none."""

    @abstractmethod
    def meta(self) -> Any | None:
        """Return the metadata, or None if there is none."""

    def unpack(self) -> tuple[int, Any | None]:
        """Return the sequence number and the value as a pair."""
        return self.seq(), self.value()

    def expires_at_ms_opt(self) -> int | None:
        """Return the absolute expiration time in Unix milliseconds, or None."""
        return _expirable.expires_at_ms_opt(self.meta())

    def expires_at_ms(self) -> int:
        """Return the expiration time, or ``NEVER_EXPIRES`` when none is set."""
        return _expirable.expires_at_ms(self.meta())

    def is_expired(self, now_ms: int) -> bool:
        """Return True if the value expired strictly before ``now_ms``."""
        return self.expires_at_ms() < now_ms