"""Conversions between application values and tombstone-aware records."""

from __future__ import annotations

from seqmarked.marked import Marked
from seqmarked.seq_marked import SeqMarked
from seqmarked.seqv import SeqV


def seqv_to_seq_marked(seqv: SeqV) -> SeqMarked:
    """Return a normal record holding ``(meta, data)`` with the same sequence number."""
    return SeqMarked.new_normal(seqv.seq, (seqv.meta, seqv.data))


def seq_marked_to_seqv(seq_marked: SeqMarked) -> SeqV | None:
    """Return the ``SeqV`` held by a normal record, or None for a tombstone.

    The sequence number of a tombstone is dropped.
    """
    seq, marked = seq_marked.parts()
    if marked.is_tombstone():
        return None
    meta, value = marked.data
    return SeqV(seq, meta, value)


def decode_seq_marked(seq_marked: SeqMarked) -> SeqMarked:
    """Turn ``(meta, bytes)`` data into ``(meta, str)``, keeping the sequence number.

    Raises ValueError if the bytes are not valid UTF-8.
    """
    seq, marked = seq_marked.parts()
    return SeqMarked(seq, marked.decode_value())


def encode_seq_marked(seq_marked: SeqMarked) -> SeqMarked:
    """Turn ``(meta, str)`` data into ``(meta, bytes)``, keeping the sequence number."""
    seq, marked = seq_marked.parts()
    return SeqMarked(seq, marked.encode_value())


__all__ = [
    "Marked",
    "decode_seq_marked",
    "encode_seq_marked",
    "seq_marked_to_seqv",
    "seqv_to_seq_marked",
]