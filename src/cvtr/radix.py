"""
Radix primitives for converting numerals between binary, octal, decimal and hex.

Provides prefix detection, source radix resolution, strict parsing into a
fixed width unsigned integer, and canonical formatting back into a numeral.

Classes:
    Radix: Enumeration of the supported bases in display order.

Functions:
    radix_label: Human readable label for a radix.
    strip_prefix: Split a numeral into its radix prefix and digits.
    detect_radix: Radix implied by a numeral prefix.
    validate_radix: Check an explicit radix is supported.
    resolve_radix: Determine the radix and digits to parse for a raw numeral.
    parse_number: Parse digits into an unsigned integer.
    format_number: Format an integer as a numeral in a radix.
    convert_numeral: Convert a prefix-free numeral from one radix to another.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

from loguru import logger

from cvtr.errors import (
    ConflictingRadixError,
    IntegerOverflowError,
    InvalidRadixError,
    ParseFailureError,
)

__all__ = [
    "DEFAULT_INT_WIDTH",
    "PREFIXES",
    "Radix",
    "convert_numeral",
    "detect_radix",
    "format_number",
    "parse_number",
    "radix_label",
    "resolve_radix",
    "strip_prefix",
    "validate_radix",
]


DEFAULT_INT_WIDTH = 64
"""Width in bits of the unsigned integers numerals are parsed into."""

_DIGITS = "0123456789abcdef"


class Radix(IntEnum):
    """
    Supported numeral bases. Iterating the enum yields the display order used
    when several outputs are requested: binary, octal, decimal, hex.
    """

    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEX = 16

    @property
    def label(self) -> str:
        return radix_label(self.value)


_LABELS = {
    Radix.BINARY: "binary",
    Radix.OCTAL: "octal",
    Radix.DECIMAL: "decimal",
    Radix.HEX: "hex",
}

PREFIXES: dict[str, Radix] = {
    "0b": Radix.BINARY,
    "0o": Radix.OCTAL,
    "0x": Radix.HEX,
}
"""Recognised numeral prefixes, matched case-insensitively."""


def radix_label(radix: int) -> str:
    """
    Return the label for a radix, for example "hex" for radix 16.
    Unsupported bases are rendered as ``radix-<n>``.
    """
    try:
        return _LABELS[Radix(radix)]
    except ValueError:
        return f"radix-{radix}"


def strip_prefix(raw: str) -> tuple[str, str]:
    """
    Split a numeral on its radix prefix.

    ::
        strip_prefix("0xaf9")  # ("0x", "af9")
        strip_prefix("1045")  # ("", "1045")

    :param raw: The numeral as typed by the user.
    :return: The prefix as it appeared in ``raw`` (or "") and the remaining digits.
    """
    head = raw[:2]
    if head.lower() in PREFIXES:
        return head, raw[2:]
    return "", raw


def detect_radix(prefix: str) -> Optional[Radix]:
    """
    Return the radix implied by a numeral prefix, or None for an empty or
    unrecognised prefix.
    """
    return PREFIXES.get(prefix.lower())


def validate_radix(value: int) -> Radix:
    """
    :param value: An explicitly requested radix.
    :return: The matching Radix member.
    :raises InvalidRadixError: If the value is not 2, 8, 10 or 16.
    """
    try:
        return Radix(value)
    except ValueError as err:
        raise InvalidRadixError(value) from err


def resolve_radix(raw: str, explicit: Optional[int] = None) -> tuple[Radix, str]:
    """
    Determine the radix to parse a raw numeral with. A recognised prefix takes
    precedence and is stripped, an explicit radix applies otherwise, and
    decimal is the fallback. An explicit radix that matches the prefix is
    accepted.

    :param raw: The numeral as typed by the user.
    :param explicit: Optional explicitly requested source radix.
    :return: The resolved radix and the prefix-free digits.
    :raises InvalidRadixError: If the explicit radix is not supported.
    :raises ConflictingRadixError: If the prefix and explicit radix disagree.
    """
    explicit_radix = validate_radix(explicit) if explicit is not None else None
    prefix, digits = strip_prefix(raw)
    prefix_radix = detect_radix(prefix)

    if prefix_radix is not None:
        if explicit_radix is not None and explicit_radix != prefix_radix:
            raise ConflictingRadixError(prefix, prefix_radix, explicit_radix)
        radix = prefix_radix
    elif explicit_radix is not None:
        radix = explicit_radix
    else:
        radix = Radix.DECIMAL

    logger.debug(f"Resolved '{raw}' to radix {int(radix)} with digits '{digits}'")
    return radix, digits


def parse_number(digits: str, radix: int, width: int = DEFAULT_INT_WIDTH) -> int:
    """
    Parse prefix-free digits as an unsigned integer. Only the digit alphabet of
    the radix is accepted; signs, whitespace and underscores are rejected.

    :param digits: The digits to parse.
    :param radix: The radix the digits are written in.
    :param width: The unsigned integer width in bits the value must fit.
    :return: The parsed value.
    :raises ParseFailureError: If the digits are empty or invalid for the radix.
    :raises IntegerOverflowError: If the value exceeds ``2**width - 1``.
    """
    radix = validate_radix(radix)
    alphabet = _DIGITS[:radix]
    if not digits or any(char not in alphabet for char in digits.lower()):
        raise ParseFailureError(digits, radix)

    value = int(digits, radix)
    if value >> width:
        raise IntegerOverflowError(digits, radix, width)

    return value


def format_number(value: int, radix: int) -> str:
    """
    Format an unsigned integer in a radix with lowercase digits and no prefix,
    grouping or padding. Zero formats as "0".
    """
    radix = validate_radix(radix)
    if radix == Radix.BINARY:
        return f"{value:b}"
    if radix == Radix.OCTAL:
        return f"{value:o}"
    if radix == Radix.HEX:
        return f"{value:x}"
    return f"{value:d}"


def convert_numeral(
    digits: str, from_radix: int, to_radix: int, width: int = DEFAULT_INT_WIDTH
) -> str:
    """
    Convert a numeral string without prefix from one radix to another.

    ::
        convert_numeral("a", 16, 10)  # "10"

    :raises ParseFailureError: If ``digits`` is not a valid numeral in ``from_radix``.
    :raises IntegerOverflowError: If the value does not fit ``width`` bits.
    """
    return format_number(parse_number(digits, from_radix, width), to_radix)
