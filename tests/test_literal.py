import pytest

from dhrender.core.literal import parse_int, parse_rgb
from dhrender.core.types import INT32_MAX

INT32_MIN = -INT32_MAX - 1


@pytest.mark.parametrize("token,expected", [
    ("0", 0),
    ("7", 7),
    ("+7", 7),
    ("-42", -42),
    ("007", 7),
    ("2147483647", INT32_MAX),
    ("-2147483647", -INT32_MAX),
])
def test_parse_int_valid(token, expected):
    assert parse_int(token) == expected


@pytest.mark.parametrize("token", [
    "", "+", "-", "12a", "1.5", " 1", "1 ", "--1", "+-1", "0x10",
])
def test_parse_int_malformed(token):
    with pytest.raises(ValueError):
        parse_int(token)


def test_parse_int_overflow():
    with pytest.raises(ValueError):
        parse_int("2147483648")
    with pytest.raises(ValueError):
        parse_int("99999999999")


def test_parse_int_cannot_parse_int32_min():
    with pytest.raises(ValueError):
        parse_int(str(INT32_MIN))


@pytest.mark.parametrize("n", [
    0, 1, -1, 10, -10, 123456789, -987654321, INT32_MAX, INT32_MIN + 1,
])
def test_parse_int_inverts_str(n):
    assert parse_int(str(n)) == n


def test_parse_rgb():
    assert parse_rgb("ff0000") == 0xFF0000
    assert parse_rgb("00FF00") == 0x00FF00
    assert parse_rgb("0000ff") == 0x0000FF
    assert parse_rgb("FfFfFf") == 0xFFFFFF
    assert parse_rgb("000000") == 0


@pytest.mark.parametrize("text", ["", "fff", "ff000", "ff00000", "gg0000", "#ff000", " ff000"])
def test_parse_rgb_rejects(text):
    with pytest.raises(ValueError):
        parse_rgb(text)
