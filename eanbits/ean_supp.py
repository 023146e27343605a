"""
Supplemental 2-digit and 5-digit EAN barcodes.
EAN-2 add-ons carry the issue number of magazines and newspapers; EAN-5 add-ons usually carry the suggested retail
price of books.
"""
from typing import ClassVar, Dict, FrozenSet, Tuple, Type

from .ean13 import char_encoding
from .errors import UnsupportedVariantError
from .helpers import EncodedBarcode, join
from .parse import DIGITS, Parse, to_digits

EANSUPP_LEFT_GUARD: Tuple[int, ...] = (1, 0, 1, 1)
EANSUPP_SEPARATOR: Tuple[int, ...] = (0, 1)

# Parity (0 = odd, 1 = even) of each EAN-5 digit, chosen by the check digit.
EAN5_PARITY: Tuple[Tuple[int, ...], ...] = (
    (0, 0, 1, 1, 1),
    (1, 0, 1, 0, 0),
    (1, 0, 0, 1, 0),
    (1, 0, 0, 0, 1),
    (0, 1, 1, 0, 0),
    (0, 0, 1, 1, 0),
    (0, 0, 0, 1, 1),
    (0, 1, 0, 1, 0),
    (0, 1, 0, 0, 1),
    (0, 0, 1, 0, 1),
)

# Parity of each EAN-2 digit, chosen by the value of the two digits modulo 4. Only the first two slots are used.
EAN2_PARITY: Tuple[Tuple[int, ...], ...] = (
    (0, 0, 0, 0, 0),
    (0, 1, 0, 0, 0),
    (1, 0, 0, 0, 0),
    (1, 1, 0, 0, 0),
)


class EANSUPP(Parse):
    """
    A supplemental EAN barcode. Constructing EANSUPP directly returns an EAN2 or an EAN5 depending on the number of
    digits; any other number of digits raises UnsupportedVariantError.
    """

    __slots__ = ("_data",)
    length: ClassVar[int] = 0
    len_stop_included = True

    def __new__(cls, data: str):
        variant = _variant_for(len(cls.parse(data))) if cls is EANSUPP else cls
        return super().__new__(variant)

    def __init__(self, data: str):
        digits = to_digits(self.parse(data))
        if len(digits) != self.length:
            raise UnsupportedVariantError(len(digits))
        self._data: Tuple[int, ...] = digits

    def __getnewargs__(self) -> Tuple[str]:
        return ("".join(map(str, self._data)),)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({''.join(map(str, self._data))!r})"

    @staticmethod
    def new(data: str) -> "EANSUPP":
        """Returns an EAN2 or EAN5 instance for data, chosen by its number of digits alone."""
        return EANSUPP(data)

    @classmethod
    def valid_len(cls) -> range:
        # A single range covering both variants, upper bound included; the variant lookup rejects 3 and 4 digits.
        return range(2, 5)

    @classmethod
    def valid_chars(cls) -> FrozenSet[str]:
        return DIGITS

    def raw_data(self) -> Tuple[int, ...]:
        """Returns the digits as they were passed into the constructor."""
        return self._data

    def checksum_digit(self) -> int:
        """Modulo-10 check digit with weights 3 and 9. Only meaningful for EAN-5."""
        odds = sum(self._data[0::2])
        evens = sum(self._data[1::2])
        checksum = (odds * 3 + evens * 9) % 10
        return 0 if checksum == 10 else checksum

    def parity(self) -> Tuple[int, ...]:
        raise NotImplementedError

    def payload(self) -> EncodedBarcode:
        encoded = [char_encoding(side, digit) for digit, side in zip(self._data, self.parity())]
        sequences = []
        for i, digit_bits in enumerate(encoded):
            if i > 0:
                sequences.append(EANSUPP_SEPARATOR)
            sequences.append(digit_bits)
        return join(sequences)

    def encode(self) -> EncodedBarcode:
        """Returns the barcode as a list of bits: 20 for EAN-2, 47 for EAN-5."""
        return join((EANSUPP_LEFT_GUARD, self.payload()))


class EAN2(EANSUPP):
    __slots__ = ()
    length = 2

    def parity(self) -> Tuple[int, ...]:
        return EAN2_PARITY[(self._data[0] * 10 + self._data[1]) % 4]


class EAN5(EANSUPP):
    __slots__ = ()
    length = 5

    def parity(self) -> Tuple[int, ...]:
        return EAN5_PARITY[self.checksum_digit()]


_VARIANTS: Dict[int, Type[EANSUPP]] = {EAN2.length: EAN2, EAN5.length: EAN5}


def _variant_for(length: int) -> Type[EANSUPP]:
    try:
        return _VARIANTS[length]
    except KeyError:
        raise UnsupportedVariantError(length) from None
