# seqmarked

Sequence-numbered values with tombstone support, for LSM trees and other
versioned data stores. Pure Python, no dependencies.

## Core types

- `seqmarked.marked.Marked`: data that is either a normal value
  (`Marked.normal(data)`) or a tombstone (`Marked.tombstone()`). A tombstone
  always orders after any normal value; two normal values compare by their
  data. `str()` gives `(data)` or `TOMBSTONE`.
- `seqmarked.seq_marked.SeqMarked`: a `Marked` paired with a non-negative
  sequence number. Values are ordered by sequence number first; a tombstone
  orders after a normal value with the same sequence number.
- `seqmarked.seqv.SeqV`: the application-level value, a frozen dataclass
  with fields `seq`, `meta` and `data`. It has no tombstone; a missing record
  is `None`. Its `repr` hides the data as `'[binary]'`.
- `seqmarked.seq_value.SeqValue`: the abstract interface with `seq()`,
  `value()`, `meta()`, `unpack()` and the expiry helpers
  `expires_at_ms_opt()`, `expires_at_ms()` and `is_expired(now_ms)`.
  It is implemented by `SeqMarked` (for `(meta, value)` data) and by
  `seqmarked.seqv.OptionalSeqV`, which wraps a `SeqV` that may be absent.
- `seqmarked.expirable.Expirable`: an abstract base for anything with an
  optional absolute expiry time in milliseconds since the Unix epoch.
  `expires_at_ms()` returns `NEVER_EXPIRES` (`2**64 - 1`) when none is set.
  The module functions `expires_at_ms_opt(x)` and `expires_at_ms(x)` also
  accept `None`.

## Example

```python
from seqmarked.seq_marked import SeqMarked

v1 = SeqMarked.new_normal(1, "data")
v2 = SeqMarked.new_normal(2, "data")
v2_ts = SeqMarked.new_tombstone(2)

assert v1 < v2      # ordered by sequence
assert v2 < v2_ts   # tombstone > normal with the same sequence

print(v2)       # {seq=2, (data)}
print(v2_ts)    # {seq=2, TOMBSTONE}
print(SeqMarked.max(v1, v2_ts).is_tombstone())  # True
```

`SeqMarked.max(a, b)` compares only the sequence number and tombstone state
(`order_key()`) and returns `b` on a tie. Tombstones keep their sequence
number in `internal_seq()`, while `user_seq()` (and `seq()`) report 0 for
them, as an application would see a deleted record. `new_not_found()` is a
tombstone with sequence number 0, for which `is_not_found()` is true.

`map(f)` applies `f` to normal data and leaves a tombstone as it is;
`data()` returns the data or `None`, and `parts()` returns
`(seq, marked)`.

## Expiry through metadata

```python
from seqmarked.expirable import Expirable
from seqmarked.seqv import SeqV, OptionalSeqV

class Ttl(Expirable):
    def __init__(self, at):
        self.at = at

    def expires_at_ms_opt(self):
        return self.at

v = OptionalSeqV(SeqV(seq=1, meta=Ttl(1000), data=b"x"))
assert v.expires_at_ms() == 1000
assert v.is_expired(1001) and not v.is_expired(999)
assert OptionalSeqV(None).unpack() == (0, None)
```

## Converting between layers

```python
from seqmarked.seqv import SeqV
from seqmarked.convert import seqv_to_seq_marked, seq_marked_to_seqv

sv = SeqV(seq=42, meta="metadata", data=b"hello")
sm = seqv_to_seq_marked(sv)      # SeqMarked holding ("metadata", b"hello")
back = seq_marked_to_seqv(sm)    # SeqV again, or None for a tombstone
assert back == sv
```

`decode_seq_marked` turns the byte value of a `SeqMarked` holding
`(meta, bytes)` into text, raising `ValueError` on invalid UTF-8;
`encode_seq_marked` goes the other way. `Marked.decode_value()` and
`Marked.encode_value()` do the same for a bare `Marked`.

## JSON-compatible forms

`Marked`, `SeqMarked` and `SeqV` each have `to_json_value()` and a static
`from_json_value(value)`, which raises `ValueError` on malformed input:

- `Marked`: `{"Normal": data}` or `"TombStone"`
- `SeqMarked`: `{"seq": 5, "marked": {"Normal": 1}}`
- `SeqV`: `{"seq": ..., "meta": ..., "data": ...}`

## What it does not do

The package holds only the value types. It does not store records, merge
LSM levels, or provide a binary encoding.

## Running the tests

```
pip install -e ".[test]"
pytest
```