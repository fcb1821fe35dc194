"""
에러 타입 검증
"""

import pickle

import pytest

from surl_shortid import DecodeError, EncodeError, ShortIDError, expand, shorten


def test_encode_error_fields():
    err = EncodeError("abc", "some reason")
    assert err.input == "abc"
    assert err.reason == "some reason"
    assert str(err) == "encode error for input 'abc': some reason"


def test_decode_error_fields():
    err = DecodeError("@#$%", "invalid character '@' in short ID (valid characters: 0-9, A-Z, a-z)")
    assert err.short_id == "@#$%"
    assert str(err) == (
        "decode error for short ID '@#$%': "
        "invalid character '@' in short ID (valid characters: 0-9, A-Z, a-z)"
    )


def test_fields_are_read_only():
    err = DecodeError("x", "y")
    with pytest.raises(AttributeError):
        err.short_id = "z"
    with pytest.raises(AttributeError):
        err.reason = "z"


def test_hierarchy():
    assert issubclass(EncodeError, ShortIDError)
    assert issubclass(DecodeError, ShortIDError)
    assert issubclass(ShortIDError, ValueError)
    assert not issubclass(EncodeError, DecodeError)


def test_caught_as_value_error():
    """기존 `except ValueError` 코드에서도 잡혀야 함"""
    with pytest.raises(ValueError):
        shorten("")
    with pytest.raises(ValueError):
        expand("@#$%")


def test_pickle_roundtrip():
    err = pickle.loads(pickle.dumps(DecodeError("a b", "bad")))
    assert isinstance(err, DecodeError)
    assert err.short_id == "a b"
    assert err.reason == "bad"
