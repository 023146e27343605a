from itertools import chain
from typing import Generator, Iterable, List

EncodedBarcode = List[int]


def join(sequences: Iterable[Iterable[int]]) -> EncodedBarcode:
    """Concatenates bit sequences into a single list, in the given order."""
    return list(chain.from_iterable(sequences))


def get_bits(number: int, length: int) -> Generator[int, None, None]:
    """Generates the specified number of bits of a number, starting with the most significant bit."""
    for i in range(length - 1, -1, -1):
        yield number >> i & 1


def collapse(bits: Iterable[int]) -> str:
    """Returns the bits as a string of "0" and "1" characters."""
    return "".join(str(bit) for bit in bits)
