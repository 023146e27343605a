import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from .code39 import Code39
from .ean8 import EAN8
from .ean13 import EAN13, UPCA
from .ean_supp import EANSUPP
from .errors import ValidationError
from .helpers import collapse

# Barcode types whose number ends in a check digit, and the class that computes it from the remaining digits.
CHECKED_TYPES: Dict[str, Callable] = {"EAN-13": EAN13, "UPC-A": UPCA, "EAN-8": EAN8}


def main(argv: Optional[List[str]] = None):
    arg_parser = argparse.ArgumentParser(description="EAN, UPC and Code 39 barcode encoder")
    arg_parser.add_argument("barcode_number", type=str,
                            help="The value of the barcode to be encoded, including the check digit for EAN-13, "
                            "UPC-A and EAN-8")
    arg_parser.add_argument("-c", "--code39", action="store_true",
                            help="Encode the value as Code 39 instead of guessing an EAN type from its length")
    arg_parser.add_argument("-k", "--checksum", action="store_true",
                            help="Append the modulo-43 check character (Code 39 only)")
    arg_parser.add_argument("-v", "--verbose", action="store_true",
                            help="Log validation details to stderr")
    args = arg_parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(name)s: %(levelname)s: %(message)s")

    barcode: str = args.barcode_number

    if args.code39:
        try:
            symbol = Code39(barcode, checksum=args.checksum)
        except ValidationError as e:
            sys.exit(f"Error: incorrect Code 39 value: {e}.")
        print(collapse(symbol.encode()))
        return

    # Attempts to recognize the barcode format. If it's incorrect, raises an exception and exits.
    try:
        barcode_type: str = get_type(barcode)
    except ValueError:
        sys.exit("Error: incorrect barcode number (must consist of 2, 5, 8, 12 or 13 digits, no spaces, "
                 "numeric only).")

    # Checks if the checksum in the provided number is correct. If not, asks the user if they want to correct the
    # checksum number and proceed anyway.
    if barcode_type in CHECKED_TYPES and not checksum_is_correct(barcode, barcode_type):
        print(f"Warning: the entered {barcode_type} barcode number is incorrect and won't be scannable "
              "(checksum failed).")
        corrected_barcode: str = checksum_is_correct(barcode, barcode_type, return_corrected=True)
        print("If you are sure that only the check digit (the final digit) is incorrect, "
              f"you can use \"{corrected_barcode}\" instead.")
        print("Please keep in mind that an incorrect checksum indicates that any part of the number can be "
              "incorrect, not just the checksum digit.")
        while True:
            use_corrected: str = input("Do you want to use the corrected number? (Y/N) ").upper().strip()
            if use_corrected == "Y":
                barcode = corrected_barcode
                break
            elif use_corrected == "N":
                sys.exit()

    print(collapse(build_symbol(barcode, barcode_type).encode()))


def get_type(barcode: str) -> str:
    """If the number is a valid barcode number, returns its type."""
    if not barcode.isdecimal() or not barcode.isascii():
        raise ValueError("Barcode number must be numeric and a positive integer.")
    number_of_digits: int = len(barcode)
    match number_of_digits:
        case 13:
            return "EAN-13"
        case 12:
            return "UPC-A"
        case 8:
            return "EAN-8"
        case 5:
            return "EAN-5"
        case 2:
            return "EAN-2"
        case _:
            raise ValueError("Incorrect number of digits.")


def checksum_is_correct(barcode_number: str, barcode_type: str, return_corrected: bool = False) -> bool | str:
    """Returns True if the check digit is correct. If return_corrected is True, returns a corrected barcode."""
    payload: str = barcode_number[:-1]
    checksum: int = CHECKED_TYPES[barcode_type](payload).checksum_digit()
    if return_corrected:
        return f"{payload}{checksum}"
    return int(barcode_number[-1]) == checksum


def build_symbol(barcode_number: str, barcode_type: str):
    """Returns the barcode object for a number of a known type. The check digit, if any, is recomputed by it."""
    if barcode_type in CHECKED_TYPES:
        return CHECKED_TYPES[barcode_type](barcode_number[:-1])
    return EANSUPP(barcode_number)


if __name__ == "__main__":
    main()
