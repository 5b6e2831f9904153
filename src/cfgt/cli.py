"""CLI implementation for cfgt."""

import logging
import sys
from typing import Optional

import typer

from . import __version__, convert
from .core.model import (
    DEFAULT_BUFFER_SIZE, DETECT, ConversionError, ConvertOptions, EncodeError,
    UnsupportedFormatError,
)

app = typer.Typer(add_completion=False, help="A configuration file translation utility.")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cfgt {__version__}")
        raise typer.Exit()


def _configure_logging(debug: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("cfgt")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if debug else logging.WARNING)
    root.propagate = False


@app.command()
def main(
    in_filename: str = typer.Option("-", "--in", "-i", help="Filename to read from ('-' for stdin)"),
    out_filename: str = typer.Option("-", "--out", "-o", help="Filename to write to ('-' for stdout)"),
    in_format: str = typer.Option(DETECT, "--in-format", "-I", help='Input format ("detect", "json", "json5", or "hcl")'),
    out_format: str = typer.Option("json", "--out-format", "-O", help='Output format ("json")'),
    pretty: Optional[bool] = typer.Option(None, "--pretty/--no-pretty", "-p", help="Pretty-print the output (default: true if output is a terminal)"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug mode."),
    version: Optional[bool] = typer.Option(None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
):
    """Convert a configuration file to JSON."""
    _configure_logging(debug)
    if pretty is None:
        pretty = sys.stdout.isatty()

    options = ConvertOptions(
        source=in_filename,
        destination=out_filename,
        in_format=in_format,
        out_format=out_format,
        pretty=pretty,
        buffer_size=DEFAULT_BUFFER_SIZE,
    )

    try:
        convert(options)
    except UnsupportedFormatError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)
    except (ConversionError, EncodeError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"unable to process input: {e}", err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
