"""Sequence-numbered values with tombstone support for LSM trees and versioned data."""

__version__ = "0.3.1"

__all__ = ["convert", "expirable", "marked", "seq_marked", "seq_value", "seqv"]