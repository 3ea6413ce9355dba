"""
Error types raised while converting a numeral between radices.

Every error is terminal for a conversion and carries the process exit code the
command line interface reports for it. All of them derive from ``ValueError``
so callers treating bad input generically keep working.
"""

from __future__ import annotations

__all__ = [
    "ConflictingRadixError",
    "ConversionError",
    "IntegerOverflowError",
    "InvalidRadixError",
    "MultipleSourceRadixError",
    "ParseFailureError",
]


class ConversionError(ValueError):
    """Base class for all conversion failures."""

    exit_code: int = 1


class InvalidRadixError(ConversionError):
    """An explicit radix outside of the supported 2, 8, 10 and 16."""

    exit_code = 3

    def __init__(self, radix: object):
        self.radix = radix
        super().__init__(
            f"invalid radix {radix!r}, expected one of 2, 8, 10 or 16"
        )


class ConflictingRadixError(ConversionError):
    """The numeral prefix and the explicit source radix disagree."""

    exit_code = 4

    def __init__(self, prefix: str, prefix_radix: int, explicit_radix: int):
        self.prefix = prefix
        self.prefix_radix = prefix_radix
        self.explicit_radix = explicit_radix
        super().__init__(
            f"prefix '{prefix}' implies radix {int(prefix_radix)} "
            f"but radix {int(explicit_radix)} was requested"
        )


class MultipleSourceRadixError(ConversionError):
    """More than one distinct source radix was given on the command line."""

    exit_code = ConflictingRadixError.exit_code

    def __init__(self, radices: list[int]):
        self.radices = radices
        super().__init__(
            "multiple input radices defined: "
            + ", ".join(str(int(radix)) for radix in radices),
        )


class ParseFailureError(ConversionError):
    """The digits are empty or not valid for the resolved radix."""

    exit_code = 5

    def __init__(self, digits: str, radix: int):
        self.digits = digits
        self.radix = radix
        if digits:
            message = f"invalid digits in '{digits}' for radix {int(radix)}"
        else:
            message = f"no digits to parse for radix {int(radix)}"
        super().__init__(message)


class IntegerOverflowError(ConversionError):
    """The parsed value does not fit the supported unsigned integer width."""

    exit_code = 6

    def __init__(self, digits: str, radix: int, width: int):
        self.digits = digits
        self.radix = radix
        self.width = width
        super().__init__(
            f"'{digits}' in radix {int(radix)} does not fit in {width} bits"
        )
