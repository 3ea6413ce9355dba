"""
Provides the entry points for converting a single numeral into one or more
radices with the `convert` function.

A conversion resolves the source radix from the numeral prefix or an explicit
radix, parses the digits into an unsigned integer, and formats the value in
every requested output radix. Failures are raised as ``ConversionError``
subclasses and no partial result is ever produced.

Classes:
    ConversionRequest: The numeral, optional source radix and requested outputs.
    ConversionResult: The parsed value and its numerals in display order.

Functions:
    select_source_radix: Combine the source radix command line flags.
    convert: Run a ConversionRequest through the conversion pipeline.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger
from pydantic import BaseModel, Field, field_validator

from cvtr.errors import ConversionError, MultipleSourceRadixError
from cvtr.radix import Radix, format_number, parse_number, resolve_radix
from cvtr.settings import settings

__all__ = [
    "DEFAULT_OUTPUTS",
    "ConversionRequest",
    "ConversionResult",
    "convert",
    "select_source_radix",
]


DEFAULT_OUTPUTS: tuple[Radix, ...] = tuple(Radix)
"""Outputs used when none are requested: every supported radix."""


class ConversionRequest(BaseModel):
    """
    A normalized request to convert one numeral.

    ``requested_outputs`` is never empty after validation: an empty selection
    falls back to DEFAULT_OUTPUTS. Duplicates are dropped and the outputs are
    kept in display order regardless of the order they were given in.
    """

    raw_input: str = Field(description="The numeral as typed, optionally prefixed.")
    explicit_source_radix: Optional[int] = Field(
        default=None,
        description=(
            "Radix to parse raw_input with when it carries no prefix. "
            "Validated during conversion."
        ),
    )
    requested_outputs: list[Radix] = Field(
        default_factory=list,
        validate_default=True,
        description="Radices to render the parsed value in.",
    )

    @field_validator("requested_outputs")
    @classmethod
    def normalize_outputs(cls, value: list[Radix]) -> list[Radix]:
        if not value:
            return list(DEFAULT_OUTPUTS)
        return sorted(set(value))


class ConversionResult(BaseModel):
    """The parsed value of a request and its numeral in each requested radix."""

    source_radix: Radix
    value: int
    outputs: dict[Radix, str]

    def lines(self, label_width: Optional[int] = None) -> list[str]:
        """
        Render one ``<label>: <value>`` line per output in display order.

        :param label_width: Minimum width of the ``<label>:`` column, defaults
            to the configured label width.
        """
        width = settings.label_width if label_width is None else label_width
        return [
            f"{radix.label + ':':<{width}} {numeral}"
            for radix, numeral in self.outputs.items()
        ]


def select_source_radix(*radices: Optional[int]) -> Optional[int]:
    """
    Combine the source radices given through the different command line flags
    into one. Flags that were not given are passed as None and repeating the
    same radix is allowed.

    ::
        select_source_radix(None, 16, None)  # 16
        select_source_radix(16, 16)  # 16

    :raises MultipleSourceRadixError: If more than one distinct radix was given.
    """
    given = sorted({radix for radix in radices if radix is not None})
    if len(given) > 1:
        raise MultipleSourceRadixError(given)
    return given[0] if given else None


def convert(
    request: ConversionRequest, width: Optional[int] = None
) -> ConversionResult:
    """
    Convert the numeral of a request into each of its requested outputs.

    ::
        request = ConversionRequest(raw_input="0x20", requested_outputs=[10])
        convert(request)
        # ConversionResult(source_radix=16, value=32, outputs={10: "32"})

    :param request: The request to convert.
    :param width: Unsigned integer width in bits, defaults to the configured width.
    :return: The conversion result.
    :raises InvalidRadixError: If the explicit source radix is not supported.
    :raises ConflictingRadixError: If the prefix and explicit radix disagree.
    :raises ParseFailureError: If the digits are empty or invalid for the radix.
    :raises IntegerOverflowError: If the value does not fit the integer width.
    """
    width = settings.int_width if width is None else width
    logger.debug(
        f"Converting '{request.raw_input}' "
        f"(source radix {request.explicit_source_radix}, width {width}) "
        f"to {[int(radix) for radix in request.requested_outputs]}"
    )

    try:
        source_radix, digits = resolve_radix(
            request.raw_input, request.explicit_source_radix
        )
        value = parse_number(digits, source_radix, width)
    except ConversionError as err:
        logger.debug(f"Conversion of '{request.raw_input}' failed: {err}")
        raise

    return ConversionResult(
        source_radix=source_radix,
        value=value,
        outputs={
            radix: format_number(value, radix) for radix in request.requested_outputs
        },
    )
