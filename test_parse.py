import pytest
from eanbits import EAN8, EANSUPP, Code39, InvalidCharacterError, LengthError, ValidationError


def test_length_error():
    with pytest.raises(LengthError) as excinfo:
        EAN8("1111112222222333333")
    assert excinfo.value.length == 19
    assert excinfo.value.valid_len == range(7, 8)
    # The upper bound is reported inclusively.
    assert str(excinfo.value) == "Data does not fit within range of 7-7"
    with pytest.raises(LengthError):
        EAN8("12345678")
    with pytest.raises(LengthError):
        EAN8("")


def test_supplemental_length_error_message():
    with pytest.raises(LengthError) as excinfo:
        EANSUPP("123456")
    assert str(excinfo.value) == "Data does not fit within range of 2-4"
    assert excinfo.value.valid_len == range(2, 5)
    with pytest.raises(LengthError):
        EANSUPP("1")


def test_invalid_character_error():
    with pytest.raises(InvalidCharacterError) as excinfo:
        EAN8("12e4r67")
    assert excinfo.value.char == "e"
    assert str(excinfo.value) == "Invalid character: e"
    with pytest.raises(InvalidCharacterError) as excinfo:
        Code39("abc")
    assert excinfo.value.char == "a"


def test_length_checked_before_characters():
    with pytest.raises(LengthError):
        EAN8("1234er123412")


def test_errors_are_value_errors():
    assert issubclass(ValidationError, ValueError)
    with pytest.raises(ValueError):
        EAN8("12345AB")


def test_parse_returns_input_unchanged():
    assert EAN8.parse("1234567") == "1234567"
    assert EANSUPP.parse("123") == "123"
    assert Code39.parse("HELLO WORLD") == "HELLO WORLD"


def test_supplemental_accepts_upper_bound():
    assert EANSUPP.valid_len() == range(2, 5)
    assert EANSUPP.parse("12345") == "12345"
    assert EAN8.valid_len() == range(7, 8)
