import logging
from typing import FrozenSet

from .errors import InvalidCharacterError, LengthError

logger = logging.getLogger(__name__)

DIGITS: FrozenSet[str] = frozenset("0123456789")


class Parse:
    """
    Validation shared by every symbology.
    Subclasses declare the characters and the number of characters they accept; parse() checks raw input
    against both before any encoding happens.
    """

    __slots__ = ()
    # Whether valid_len().stop itself is an accepted length. The reported bounds stay start-(stop - 1) either way.
    len_stop_included = False

    @classmethod
    def valid_chars(cls) -> FrozenSet[str]:
        raise NotImplementedError

    @classmethod
    def valid_len(cls) -> range:
        raise NotImplementedError

    @classmethod
    def parse(cls, data: str) -> str:
        """Returns data unchanged if it is acceptable, otherwise raises a ValidationError."""
        valid_len: range = cls.valid_len()
        max_len: int = valid_len.stop if cls.len_stop_included else valid_len.stop - 1
        if not valid_len.start <= len(data) <= max_len:
            logger.debug("%s rejected %r: length %d", cls.__name__, data, len(data))
            raise LengthError(len(data), valid_len)

        valid_chars: FrozenSet[str] = cls.valid_chars()
        bad_char = next((char for char in data if char not in valid_chars), None)
        if bad_char is not None:
            logger.debug("%s rejected %r: character %r", cls.__name__, data, bad_char)
            raise InvalidCharacterError(bad_char)
        return data


def to_digits(data: str) -> tuple:
    """Converts an already parsed numeric string into a tuple of ints."""
    assert all(char in DIGITS for char in data), f"unvalidated data reached digit conversion: {data!r}"
    return tuple(ord(char) - ord("0") for char in data)
