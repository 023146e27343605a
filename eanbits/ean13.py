"""
EAN-13 and UPC-A barcodes, and the digit tables and guard patterns shared by the whole EAN family.
"""
from typing import FrozenSet, Tuple

from .helpers import EncodedBarcode, get_bits, join
from .parse import DIGITS, Parse, to_digits

EAN_LEFT_GUARD: Tuple[int, ...] = (1, 0, 1)
EAN_MIDDLE_GUARD: Tuple[int, ...] = (0, 1, 0, 1, 0)
EAN_RIGHT_GUARD: Tuple[int, ...] = (1, 0, 1)

ODD_PARITY = 0
EVEN_PARITY = 1
RIGHT_SIDE = 2

# Values for encoding the left-hand side of the barcode, in decimal, indexed by digit.
# Set A values have odd parity, set B values have even parity.
_LEFT_ODD_VALUES = (13, 25, 19, 61, 35, 49, 47, 59, 55, 11)
_LEFT_EVEN_VALUES = (39, 51, 27, 33, 29, 57, 5, 17, 9, 23)
# Values for encoding the right-hand side of the barcode, in decimal. For every EAN variant and UPC.
_RIGHT_VALUES = (114, 102, 108, 66, 92, 78, 80, 68, 72, 116)


def _table(values: Tuple[int, ...]) -> Tuple[Tuple[int, ...], ...]:
    return tuple(tuple(get_bits(value, 7)) for value in values)


# Indexed as EAN_ENCODINGS[ODD_PARITY | EVEN_PARITY | RIGHT_SIDE][digit].
EAN_ENCODINGS: Tuple[Tuple[Tuple[int, ...], ...], ...] = (
    _table(_LEFT_ODD_VALUES),
    _table(_LEFT_EVEN_VALUES),
    _table(_RIGHT_VALUES),
)

# Values for encoding the very first digit of EAN-13 barcodes. The digit is encoded within the left-side 6 digits as a
# combination of their parity, where odd parity = 0 and even parity = 1.
# For example, the digit one is encoded as 11, that is binary 001011, or "odd", "odd", "even", "odd", "even", "even".
EAN_PARITY: Tuple[int, ...] = (0, 11, 13, 14, 19, 25, 28, 21, 22, 26)


def char_encoding(side: int, digit: int) -> Tuple[int, ...]:
    """Returns the 7 bits for a digit from the requested table."""
    return EAN_ENCODINGS[side][digit]


class EAN13(Parse):
    """An EAN-13 barcode built from 12 digits; the 13th, the check digit, is computed."""

    __slots__ = ("_data",)

    def __init__(self, data: str):
        self._data: Tuple[int, ...] = to_digits(self.parse(data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({''.join(map(str, self.raw_data()))!r})"

    @classmethod
    def valid_len(cls) -> range:
        return range(12, 13)

    @classmethod
    def valid_chars(cls) -> FrozenSet[str]:
        return DIGITS

    def raw_data(self) -> Tuple[int, ...]:
        """Returns the digits as they were passed into the constructor."""
        return self._data

    def _digits(self) -> Tuple[int, ...]:
        return self._data

    def checksum_digit(self) -> int:
        """Weights the digits 1, 3, 1, 3... from the left and returns what brings the sum up to a multiple of 10."""
        digits = self._digits()
        odds = sum(digits[0::2])
        evens = sum(digits[1::2])
        checksum = 10 - ((odds + evens * 3) % 10)
        return 0 if checksum == 10 else checksum

    def number_system_digit(self) -> int:
        return self._digits()[0]

    def parity(self) -> Tuple[int, ...]:
        """Returns the table (odd or even parity) used for each of the six left-hand digits."""
        pattern = EAN_PARITY[self.number_system_digit()]
        return tuple(pattern >> (5 - i) & 1 for i in range(6))

    def left_payload(self) -> EncodedBarcode:
        left_digits = self._digits()[1:7]
        return join(char_encoding(side, digit) for side, digit in zip(self.parity(), left_digits))

    def right_payload(self) -> EncodedBarcode:
        right_digits = self._digits()[7:] + (self.checksum_digit(),)
        return join(char_encoding(RIGHT_SIDE, digit) for digit in right_digits)

    def encode(self) -> EncodedBarcode:
        """Returns the entire barcode as a list of 95 bits."""
        return join((EAN_LEFT_GUARD, self.left_payload(), EAN_MIDDLE_GUARD, self.right_payload(),
                     EAN_RIGHT_GUARD))


class UPCA(EAN13):
    """
    A UPC-A barcode built from 11 digits.
    UPC-A is an EAN-13 whose number system digit is 0, so it is encoded with only odd parity on the left.
    """

    __slots__ = ()

    @classmethod
    def valid_len(cls) -> range:
        return range(11, 12)

    def _digits(self) -> Tuple[int, ...]:
        return (0,) + self._data
