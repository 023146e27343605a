"""
Code 39 barcodes, an alphanumeric symbology used on industrial and logistics labels.

Every character is made of 5 bars and 4 spaces, 3 of which are wide. Narrow elements are one module wide and wide
elements two, so each character takes 12 modules. Characters are separated by a single narrow space and the barcode
is framed by the "*" start/stop character.
"""
from typing import Dict, FrozenSet, Tuple

from .helpers import EncodedBarcode, join
from .parse import Parse

# The order of this string gives each character its value for the modulo-43 check character.
CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%"
GUARD_CHAR = "*"

# Wide bars (5 bits, 1 = wide), in order of the character's position within its row of ten.
_BAR_PATTERNS = (0b10001, 0b01001, 0b11000, 0b00101, 0b10100, 0b01100, 0b00011, 0b10010, 0b01010, 0b00110)
# The wide space (4 bits) shared by each row of ten characters.
_ROWS = (
    ("1234567890", 0b0100),
    ("ABCDEFGHIJ", 0b0010),
    ("KLMNOPQRST", 0b0001),
    ("UVWXYZ-. *", 0b1000),
)
# These have narrow bars only and three wide spaces.
_WIDE_SPACE_CHARS = {"$": 0b1110, "/": 0b1101, "+": 0b1011, "%": 0b0111}


def _element_widths(bars: int, spaces: int) -> Tuple[Tuple[int, int], ...]:
    """Returns (bit, width) pairs for the 9 elements, alternating bar and space."""
    elements = []
    for i in range(5):
        elements.append((1, 2 if bars >> (4 - i) & 1 else 1))
        if i < 4:
            elements.append((0, 2 if spaces >> (3 - i) & 1 else 1))
    return tuple(elements)


def _char_bits(bars: int, spaces: int) -> Tuple[int, ...]:
    return tuple(bit for bit, width in _element_widths(bars, spaces) for _ in range(width))


def _build_encodings() -> Dict[str, Tuple[int, ...]]:
    encodings = {}
    for row, spaces in _ROWS:
        for char, bars in zip(row, _BAR_PATTERNS):
            encodings[char] = _char_bits(bars, spaces)
    for char, spaces in _WIDE_SPACE_CHARS.items():
        encodings[char] = _char_bits(0, spaces)
    return encodings


CODE39_ENCODINGS: Dict[str, Tuple[int, ...]] = _build_encodings()
CODE39_GUARD: Tuple[int, ...] = CODE39_ENCODINGS[GUARD_CHAR]
CODE39_SEPARATOR: Tuple[int, ...] = (0,)


class Code39(Parse):
    """A Code 39 barcode, optionally followed by its modulo-43 check character."""

    __slots__ = ("_data", "_checksum")

    def __init__(self, data: str, checksum: bool = False):
        self._data: Tuple[str, ...] = tuple(self.parse(data))
        self._checksum: bool = checksum

    def __repr__(self) -> str:
        return f"Code39({''.join(self._data)!r}, checksum={self.checksum})"

    @property
    def checksum(self) -> bool:
        """Whether the modulo-43 check character is encoded after the data."""
        return self._checksum

    @classmethod
    def valid_len(cls) -> range:
        return range(1, 256)

    @classmethod
    def valid_chars(cls) -> FrozenSet[str]:
        return frozenset(CHARS)

    def raw_data(self) -> Tuple[str, ...]:
        """Returns the characters as they were passed into the constructor."""
        return self._data

    def checksum_char(self) -> str:
        return CHARS[sum(CHARS.index(char) for char in self._data) % len(CHARS)]

    def payload(self) -> EncodedBarcode:
        chars = self._data + (self.checksum_char(),) if self._checksum else self._data
        sequences = [CODE39_SEPARATOR]
        for char in chars:
            sequences.append(CODE39_ENCODINGS[char])
            sequences.append(CODE39_SEPARATOR)
        return join(sequences)

    def encode(self) -> EncodedBarcode:
        return join((CODE39_GUARD, self.payload(), CODE39_GUARD))
