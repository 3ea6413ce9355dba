"""
cvtr: A command line numeric base converter.

cvtr converts a single numeral between binary, octal, decimal and hexadecimal.
The source radix is taken from a ``0b``, ``0o`` or ``0x`` prefix, from an
explicit radix, or defaults to decimal. The value is parsed into a fixed width
unsigned integer and printed in each requested output radix.

The library offers:
- Radix primitives for prefix detection, strict parsing and formatting.
- A request/result conversion pipeline with a typed error taxonomy.
- A Typer based command line interface, available as ``cvtr``.
"""

from .converter import (
    DEFAULT_OUTPUTS,
    ConversionRequest,
    ConversionResult,
    convert,
    select_source_radix,
)
from .errors import (
    ConflictingRadixError,
    ConversionError,
    IntegerOverflowError,
    InvalidRadixError,
    MultipleSourceRadixError,
    ParseFailureError,
)
from .logging import configure_logger
from .radix import Radix
from .settings import reload_settings, settings

__all__ = [
    "DEFAULT_OUTPUTS",
    "ConflictingRadixError",
    "ConversionError",
    "ConversionRequest",
    "ConversionResult",
    "IntegerOverflowError",
    "InvalidRadixError",
    "MultipleSourceRadixError",
    "ParseFailureError",
    "Radix",
    "configure_logger",
    "convert",
    "reload_settings",
    "select_source_radix",
    "settings",
]
