"""
CLI entrypoint for cvtr.

This module provides a command-line interface for converting a numeral between
binary, octal, decimal and hexadecimal. The CLI is built using Typer.

The CLI can be accessed through the `cvtr` command after installation, or by
running this module directly with `python -m cvtr`.

Usage:
    $ cvtr --help
    $ cvtr --version
    $ cvtr -d 0x20
    $ cvtr -b -x 10
    $ cvtr -X ff
"""

from importlib.metadata import version as pkg_version
from typing import Annotated, Optional

import typer  # type: ignore[import-not-found]

from cvtr.converter import ConversionRequest, convert, select_source_radix
from cvtr.errors import ConversionError
from cvtr.logging import logger
from cvtr.radix import Radix

__all__ = ["app"]

app = typer.Typer(
    name="cvtr",
    help="cvtr - CLI numeric base converter",
    add_completion=False,
)


def version_callback(value: bool):
    """
    Callback function to print the version of the cvtr package and exit.

    :param value: Boolean indicating whether the version option was specified.
        If True, prints version and exits.
    """
    if value:
        typer.echo(f"cvtr version: {pkg_version('cvtr')}")
        raise typer.Exit


@app.command(
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
def cvtr(
    number: Annotated[
        str,
        typer.Argument(
            help="Number to convert, optionally prefixed with 0b, 0o or 0x",
            show_default=False,
        ),
    ],
    display_bin: Annotated[
        bool, typer.Option("--bin", "-b", help="Convert number to binary")
    ] = False,
    display_oct: Annotated[
        bool, typer.Option("--oct", "-o", help="Convert number to octal")
    ] = False,
    display_dec: Annotated[
        bool, typer.Option("--dec", "-d", help="Convert number to decimal")
    ] = False,
    display_hex: Annotated[
        bool, typer.Option("--hex", "-x", help="Convert number to hexadecimal")
    ] = False,
    radix: Annotated[
        Optional[int],
        typer.Option(
            "--radix",
            "-r",
            help="Radix of the input number (2, 8, 10 or 16)",
            show_default=False,
        ),
    ] = None,
    from_bin: Annotated[
        bool, typer.Option("--from-bin", "-B", help="Convert number from binary")
    ] = False,
    from_oct: Annotated[
        bool, typer.Option("--from-oct", "-O", help="Convert number from octal")
    ] = False,
    from_dec: Annotated[
        bool, typer.Option("--from-dec", "-D", help="Convert number from decimal")
    ] = False,
    from_hex: Annotated[
        bool, typer.Option("--from-hex", "-X", help="Convert number from hexadecimal")
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = None,
):
    """
    Convert NUMBER between binary, octal, decimal and hexadecimal.

    The input radix is taken from a 0b, 0o or 0x prefix, else from --radix or
    one of -B/-O/-D/-X, else decimal. Without any output flag the number is
    printed in every radix.

    \b
    Examples:
        cvtr -d 0x20         # decimal: 32
        cvtr -x 32           # hex: 20
        cvtr -b -x 10        # binary: 1010 and hex: a
        cvtr -X -d ff        # decimal: 255
    """
    outputs = [
        output
        for flag, output in (
            (display_bin, Radix.BINARY),
            (display_oct, Radix.OCTAL),
            (display_dec, Radix.DECIMAL),
            (display_hex, Radix.HEX),
        )
        if flag
    ]

    try:
        source_radix = select_source_radix(
            radix,
            Radix.BINARY if from_bin else None,
            Radix.OCTAL if from_oct else None,
            Radix.DECIMAL if from_dec else None,
            Radix.HEX if from_hex else None,
        )
        result = convert(
            ConversionRequest(
                raw_input=number,
                explicit_source_radix=source_radix,
                requested_outputs=outputs,
            )
        )
    except ConversionError as err:
        logger.debug(f"Exiting with code {err.exit_code}: {err}")
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(err.exit_code) from err

    for line in result.lines():
        typer.echo(line)


if __name__ == "__main__":
    app()
