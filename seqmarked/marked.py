"""Data that may be marked as deleted (a tombstone)."""

from __future__ import annotations

from typing import Any

_NORMAL_TAG = "Normal"
_TOMBSTONE_TAG = "TombStone"


class Marked:
    """Either normal data or a deletion marker.

    A tombstone is always greater than any normal value. Two normal values
    compare by their data.
    """

    __slots__ = ("_data", "_tombstone")

    def __init__(self, data: Any = None, tombstone: bool = False) -> None:
        if tombstone and data is not None:
            raise ValueError("a tombstone carries no data")
        object.__setattr__(self, "_data", data)
        object.__setattr__(self, "_tombstone", bool(tombstone))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @staticmethod
    def normal(data: Any) -> Marked:
        """Return a normal value holding ``data``."""
        return Marked(data)

    @staticmethod
    def tombstone() -> Marked:
        """Return a deletion marker."""
        return Marked(tombstone=True)

    @property
    def data(self) -> Any:
        """The data of a normal value; None for a tombstone."""
        return None if self._tombstone else self._data

    def is_normal(self) -> bool:
        """Return True if this holds normal data."""
        return not self._tombstone

    def is_tombstone(self) -> bool:
        """Return True if this is a deletion marker."""
        return self._tombstone

    def _key(self) -> tuple:
        return (1,) if self._tombstone else (0, self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Marked):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Marked):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Marked):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Marked):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Marked):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        if self._tombstone:
            return "Marked.tombstone()"
        return f"Marked.normal({self._data!r})"

    def __str__(self) -> str:
        if self._tombstone:
            return "TOMBSTONE"
        return f"({self._data})"

    def decode_value(self) -> Marked:
        """Turn ``(meta, bytes)`` data into ``(meta, str)`` by UTF-8 decoding.

        Raises ValueError if the bytes are not valid UTF-8.
        """
        if self._tombstone:
            return self
        meta, raw = self._data
        try:
            text = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(f"fail to convert bytes to str: {exc}") from exc
        return Marked.normal((meta, text))

    def encode_value(self) -> Marked:
        """Turn ``(meta, str)`` data into ``(meta, bytes)`` by UTF-8 encoding."""
        if self._tombstone:
            return self
        meta, text = self._data
        return Marked.normal((meta, text.encode("utf-8")))

    def to_json_value(self) -> Any:
        """Return a JSON-compatible form: ``{"Normal": data}`` or ``"TombStone"``."""
        if self._tombstone:
            return _TOMBSTONE_TAG
        return {_NORMAL_TAG: self._data}

    @staticmethod
    def from_json_value(value: Any) -> Marked:
        """Build a Marked from the form produced by ``to_json_value``."""
        if value == _TOMBSTONE_TAG:
            return Marked.tombstone()
        if isinstance(value, dict) and len(value) == 1 and _NORMAL_TAG in value:
            return Marked.normal(value[_NORMAL_TAG])
        raise ValueError(f"invalid Marked value: {value!r}")