"""Exceptions raised when raw input cannot be turned into a barcode."""


class ValidationError(ValueError):
    """Base class for every input rejected at construction time."""


class LengthError(ValidationError):
    """The input has a character count outside the symbology's accepted range."""

    def __init__(self, length: int, valid_len: range):
        self.length = length
        self.valid_len = valid_len
        # The reported upper bound is inclusive.
        super().__init__(f"Data does not fit within range of {valid_len.start}-{valid_len.stop - 1}")


class InvalidCharacterError(ValidationError):
    """The input contains a character the symbology cannot encode."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Invalid character: {char}")


class UnsupportedVariantError(ValidationError):
    """A supplemental barcode was given a digit count other than 2 or 5."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Invalid supplemental length: {length}")
