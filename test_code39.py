import pytest
from eanbits import Code39, InvalidCharacterError, LengthError, collapse
from eanbits.code39 import CHARS, CODE39_ENCODINGS, CODE39_GUARD

GUARD = "100101101101"


def test_encodings():
    assert collapse(CODE39_GUARD) == GUARD
    assert collapse(CODE39_ENCODINGS["0"]) == "101001101101"
    assert collapse(CODE39_ENCODINGS["A"]) == "110101001011"
    assert set(CODE39_ENCODINGS) == set(CHARS) | {"*"}
    assert all(len(pattern) == 12 for pattern in CODE39_ENCODINGS.values())
    assert len(set(CODE39_ENCODINGS.values())) == 44


def test_new_code39():
    assert Code39("HELLO-1").raw_data() == ("H", "E", "L", "L", "O", "-", "1")
    with pytest.raises(InvalidCharacterError):
        Code39("hello")
    with pytest.raises(InvalidCharacterError):
        Code39("A*B")
    with pytest.raises(LengthError):
        Code39("")
    with pytest.raises(LengthError):
        Code39("A" * 256)


def test_checksum_char():
    assert Code39("CODE39").checksum_char() == "W"
    assert Code39("A").checksum_char() == "A"


def test_code39_encode():
    assert collapse(Code39("A").encode()) == GUARD + "0" + "110101001011" + "0" + GUARD
    assert collapse(Code39("A", checksum=True).encode()) == \
        GUARD + "0" + "110101001011" + "0" + "110101001011" + "0" + GUARD
    assert len(Code39("CODE39").encode()) == 12 * 8 + 7


def test_code39_is_immutable():
    code39 = Code39("A")
    encoded = code39.encode()
    assert code39.checksum is False
    with pytest.raises(AttributeError):
        code39.checksum = True
    assert code39.encode() == encoded
    assert Code39("A", checksum=True).checksum is True
