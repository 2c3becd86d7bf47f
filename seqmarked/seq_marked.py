"""Sequence-numbered values that may be tombstones."""

from __future__ import annotations

from typing import Any, Callable

from seqmarked.marked import Marked
from seqmarked.seq_value import SeqValue


class SeqMarked(SeqValue):
    """A ``Marked`` value bound to a sequence number.

    Values compare by sequence number first, then by the marked data.
    A tombstone is greater than a normal value with the same sequence number.

    When the data is a ``(meta, value)`` pair, this is also a ``SeqValue``.
    A tombstone then reports sequence number 0 and no value or metadata.
    """

    __slots__ = ("_seq", "_marked")

    def __init__(self, seq: int, marked: Marked) -> None:
        if isinstance(seq, bool) or not isinstance(seq, int) or seq < 0:
            raise ValueError(f"invalid sequence number: {seq!r}")
        if not isinstance(marked, Marked):
            raise TypeError(f"expected Marked, got {type(marked).__name__}")
        object.__setattr__(self, "_seq", seq)
        object.__setattr__(self, "_marked", marked)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @staticmethod
    def new_normal(seq: int, data: Any) -> SeqMarked:
        """Return a normal value with the given sequence number."""
        return SeqMarked(seq, Marked.normal(data))

    @staticmethod
    def new_tombstone(seq: int) -> SeqMarked:
        """Return a tombstone with the given sequence number."""
        return SeqMarked(seq, Marked.tombstone())

    @staticmethod
    def new_not_found() -> SeqMarked:
        """Return the marker of an absent record (not even marked as deleted)."""
        return SeqMarked(0, Marked.tombstone())

    @property
    def marked(self) -> Marked:
        """The marked data."""
        return self._marked

    def is_normal(self) -> bool:
        """Return True if this holds normal data."""
        return self._marked.is_normal()

    def is_tombstone(self) -> bool:
        """Return True if this is a tombstone."""
        return self._marked.is_tombstone()

    def is_not_found(self) -> bool:
        """Return True if this represents an absent record."""
        return self.is_absent()

    def is_absent(self) -> bool:
        """Return True for a tombstone with sequence number 0."""
        return self._seq == 0 and self.is_tombstone()

    def map(self, f: Callable[[Any], Any]) -> SeqMarked:
        """Apply ``f`` to normal data, keeping sequence and tombstone state.

        ``f`` is not called for a tombstone. Errors raised by ``f`` propagate.
        """
        if self.is_tombstone():
            return self
        return SeqMarked(self._seq, Marked.normal(f(self._marked.data)))

    def order_key(self) -> SeqMarked:
        """Return a value that keeps only the sequence and tombstone state."""
        if self.is_tombstone():
            return self
        return SeqMarked(self._seq, Marked.normal(None))

    def internal_seq(self) -> int:
        """Return the sequence number; a tombstone keeps its own."""
        return self._seq

    def user_seq(self) -> int:
        """Return the sequence number for applications; 0 for a tombstone."""
        return 0 if self.is_tombstone() else self._seq

    @staticmethod
    def max(a: SeqMarked, b: SeqMarked) -> SeqMarked:
        """Return the greater of two values by ``order_key``; ``b`` on a tie."""
        return a if a.order_key() > b.order_key() else b

    def data(self) -> Any | None:
        """Return the data if normal, None for a tombstone."""
        return self._marked.data

    def parts(self) -> tuple[int, Marked]:
        """Return the sequence number and the marked data."""
        return self._seq, self._marked

    def debug_str(self) -> str:
        """Return a description that shows the data by its ``repr``."""
        if self.is_tombstone():
            body = "TOMBSTONE"
        else:
            body = f"({self._marked.data!r})"
        return f"{{seq: {self._seq}, {body}}}"

    def seq(self) -> int:
        return self.user_seq()

    def value(self) -> Any | None:
        if self.is_tombstone():
            return None
        _meta, value = self._marked.data
        return value

    def meta(self) -> Any | None:
        if self.is_tombstone():
            return None
        meta, _value = self._marked.data
        return meta

    def to_json_value(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping ``{"seq": ..., "marked": ...}``."""
        return {"seq": self._seq, "marked": self._marked.to_json_value()}

    @staticmethod
    def from_json_value(value: Any) -> SeqMarked:
        """Build a SeqMarked from the mapping produced by ``to_json_value``."""
        if not isinstance(value, dict):
            raise ValueError(f"invalid SeqMarked value: {value!r}")
        if "seq" not in value or "marked" not in value:
            raise ValueError(f"invalid SeqMarked value: {value!r}")
        return SeqMarked(value["seq"], Marked.from_json_value(value["marked"]))

    def _key(self) -> tuple[int, Marked]:
        return (self._seq, self._marked)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeqMarked):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SeqMarked):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SeqMarked):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SeqMarked):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SeqMarked):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"SeqMarked({self._seq}, {self._marked!r})"

    def __str__(self) -> str:
        return f"{{seq={self._seq}, {self._marked}}}"