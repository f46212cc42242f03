import pytest

from utf8_toolkit.utf8.config import REPLACEMENT_CHARACTER
from utf8_toolkit.utf8.is_valid_utf8 import is_valid_utf8
from utf8_toolkit.utf8.to_valid_utf8 import to_valid_utf8

R = REPLACEMENT_CHARACTER

SAMPLES = [
    b"",
    b"plain ascii",
    "café 日本語 😀".encode("utf-8"),
    b"\xff\xfe\xfd\x80\x00",
    b"A\xffB",
    b"caf\xc3\xa9\xff",
    b"\xc0\xaf\xe2\x82",
    b"\xf0\x9f\x98" + "ok".encode("utf-8"),
    bytes(range(256)),
]


def test_replaces_single_bad_byte():
    assert to_valid_utf8(b"A\xffB") == b"A" + R + b"B"


def test_valid_input_is_returned_as_is():
    data = "déjà vu".encode("utf-8")
    assert to_valid_utf8(data) is data


@pytest.mark.parametrize("data,expected", [
    (b"\xc3", R),
    (b"\xe2\x82", R + R),
    (b"\xc0\xaf", R + R),
    (b"\x00", R),
    (b"caf\xc3\xa9\xff", b"caf\xc3\xa9" + R),
    (b"\xc3\xc3\xa9", R + b"\xc3\xa9"),
    (b"\xf0\x9f\x98\x80\x80", b"\xf0\x9f\x98\x80" + R),
])
def test_replacement(data, expected):
    assert to_valid_utf8(data) == expected


@pytest.mark.parametrize("data", SAMPLES)
def test_result_is_always_valid(data):
    assert is_valid_utf8(to_valid_utf8(data))


@pytest.mark.parametrize("data", SAMPLES)
def test_idempotent(data):
    once = to_valid_utf8(data)
    assert to_valid_utf8(once) == once


def test_long_ascii_run_before_bad_byte():
    assert to_valid_utf8(b"x" * 10_000 + b"\xff") == b"x" * 10_000 + R


def test_long_multibyte_run_before_bad_byte():
    data = "é".encode("utf-8") * 5_000
    assert to_valid_utf8(data + b"\x80") == data + R


def test_bad_bytes_scattered_through_long_input():
    chunk = b"abc" * 100
    data = (chunk + b"\xfe") * 50
    result = to_valid_utf8(data)
    assert result == (chunk + R) * 50
    assert is_valid_utf8(result)
