"""Encodes EAN-13, UPC-A, EAN-8, EAN-2/EAN-5 and Code 39 barcodes into sequences of bars (1) and spaces (0)."""
from .code39 import Code39
from .ean8 import EAN8
from .ean13 import EAN13, UPCA
from .ean_supp import EAN2, EAN5, EANSUPP
from .errors import InvalidCharacterError, LengthError, UnsupportedVariantError, ValidationError
from .helpers import collapse, join

__all__ = [
    "Code39",
    "EAN2",
    "EAN5",
    "EAN8",
    "EAN13",
    "EANSUPP",
    "UPCA",
    "InvalidCharacterError",
    "LengthError",
    "UnsupportedVariantError",
    "ValidationError",
    "collapse",
    "join",
]
