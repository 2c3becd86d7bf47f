"""Application-level values bound to a sequence number."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable

from seqmarked.seq_value import SeqValue


@dataclass(frozen=True, repr=False)
class SeqV:
    """A value with a sequence number and optional metadata.

    A stored tombstone is represented at this level by the absence of a
    ``SeqV`` (see ``OptionalSeqV``); its internal sequence number is dropped.
    """

    seq: int = 0
    meta: Any = None
    data: Any = field(default=b"")

    def __repr__(self) -> str:
        return f"SeqV(seq={self.seq}, meta={self.meta!r}, data='[binary]')"

    def with_seq(self, seq: int) -> SeqV:
        """Return a copy with the sequence number replaced."""
        return dataclasses.replace(self, seq=seq)

    def with_meta(self, meta: Any) -> SeqV:
        """Return a copy with the metadata replaced."""
        return dataclasses.replace(self, meta=meta)

    def with_value(self, value: Any) -> SeqV:
        """Return a copy with the data replaced."""
        return dataclasses.replace(self, data=value)

    def map(self, f: Callable[[Any], Any]) -> SeqV:
        """Return a copy with ``f`` applied to the data; errors from ``f`` propagate."""
        return dataclasses.replace(self, data=f(self.data))

    def to_json_value(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping of the fields."""
        return {"seq": self.seq, "meta": self.meta, "data": self.data}

    @staticmethod
    def from_json_value(value: Any) -> SeqV:
        """Build a SeqV from the mapping produced by ``to_json_value``."""
        if not isinstance(value, dict):
            raise ValueError(f"invalid SeqV value: {value!r}")
        seq = value.get("seq")
        if isinstance(seq, bool) or not isinstance(seq, int) or seq < 0:
            raise ValueError(f"invalid SeqV seq: {seq!r}")
        if "data" not in value:
            raise ValueError("missing field 'data'")
        return SeqV(seq, value.get("meta"), value["data"])


@dataclass(frozen=True)
class OptionalSeqV(SeqValue):
    """A ``SeqV`` that may be absent, viewed as a ``SeqValue``.

    An absent value has sequence number 0 and no value or metadata.
    """

    inner: SeqV | None = None

    def seq(self) -> int:
        return 0 if self.inner is None else self.inner.seq

    def value(self) -> Any | None:
        return None if self.inner is None else self.inner.data

    def meta(self) -> Any | None:
        return None if self.inner is None else self.inner.meta