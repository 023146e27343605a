"""
EAN-8 barcodes, the short EAN variant used on small packages such as cigarettes and chewing gum.
"""
from typing import FrozenSet, Tuple

from .ean13 import EAN_LEFT_GUARD, EAN_MIDDLE_GUARD, EAN_RIGHT_GUARD, ODD_PARITY, RIGHT_SIDE, char_encoding
from .helpers import EncodedBarcode, join
from .parse import DIGITS, Parse, to_digits


class EAN8(Parse):
    """An EAN-8 barcode built from 7 digits; the 8th, the check digit, is computed."""

    __slots__ = ("_data",)

    def __init__(self, data: str):
        self._data: Tuple[int, ...] = to_digits(self.parse(data))

    def __repr__(self) -> str:
        return f"EAN8({''.join(map(str, self._data))!r})"

    @classmethod
    def valid_len(cls) -> range:
        return range(7, 8)

    @classmethod
    def valid_chars(cls) -> FrozenSet[str]:
        return DIGITS

    def raw_data(self) -> Tuple[int, ...]:
        """Returns the digits as they were passed into the constructor."""
        return self._data

    def checksum_digit(self) -> int:
        """Weights the digits 3, 1, 3, 1... from the left and returns what brings the sum up to a multiple of 10."""
        odds = sum(self._data[0::2])
        evens = sum(self._data[1::2])
        checksum = 10 - ((odds * 3 + evens) % 10)
        return 0 if checksum == 10 else checksum

    def number_system_encoding(self) -> EncodedBarcode:
        return join(char_encoding(ODD_PARITY, digit) for digit in self._data[0:2])

    def left_payload(self) -> EncodedBarcode:
        return join(char_encoding(ODD_PARITY, digit) for digit in self._data[2:4])

    def right_payload(self) -> EncodedBarcode:
        return join(char_encoding(RIGHT_SIDE, digit) for digit in self._data[4:])

    def checksum_encoding(self) -> Tuple[int, ...]:
        return char_encoding(RIGHT_SIDE, self.checksum_digit())

    def encode(self) -> EncodedBarcode:
        """Returns the entire barcode as a list of 67 bits."""
        return join((EAN_LEFT_GUARD, self.number_system_encoding(), self.left_payload(), EAN_MIDDLE_GUARD,
                     self.right_payload(), self.checksum_encoding(), EAN_RIGHT_GUARD))
