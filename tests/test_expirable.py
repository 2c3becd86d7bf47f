from dataclasses import dataclass

import pytest

from seqmarked.expirable import (
    NEVER_EXPIRES,
    Expirable,
    expires_at_ms,
    expires_at_ms_opt,
)

U64_MAX = 18446744073709551615


@dataclass(frozen=True)
class ExpirableImpl(Expirable):
    expires: int | None

    def expires_at_ms_opt(self):
        return self.expires


def test_expirable_with_time():
    e1 = ExpirableImpl(1)
    assert Expirable.expires_at_ms(e1) == 1
    assert expires_at_ms_opt(e1) == 1


def test_expirable_without_time():
    e2 = ExpirableImpl(None)
    assert Expirable.expires_at_ms(e2) == U64_MAX
    assert expires_at_ms_opt(e2) is None


def test_never_expires_is_returned_without_time():
    assert expires_at_ms(ExpirableImpl(None)) == NEVER_EXPIRES
    assert NEVER_EXPIRES == U64_MAX


def test_optional_some():
    e1 = ExpirableImpl(1)
    assert expires_at_ms_opt(e1) == 1
    assert expires_at_ms(e1) == 1


def test_optional_some_without_time():
    e2 = ExpirableImpl(None)
    assert expires_at_ms_opt(e2) is None
    assert expires_at_ms(e2) == U64_MAX


def test_optional_none():
    assert expires_at_ms_opt(None) is None
    assert expires_at_ms(None) == U64_MAX


def test_abstract_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Expirable()