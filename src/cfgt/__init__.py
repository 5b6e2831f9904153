"""cfgt - translate JSON, JSON5 and HCL configuration files to JSON."""

import logging

from .core.model import (                                              # re-export
    ConversionError, ConvertOptions, EncodeError, ParseAttemptError,
    ParseError, Result, UnsupportedFormatError,
)
from .core.diagnostics import Diagnostic, describe_failure, locate
from .core.registry import _REGISTRY                                   # singleton
from .core.resolver import resolve
from .core.util import encode_value
from .io import open_reader, open_writer

# Import grammars to trigger registration
from .grammars import json, json5, hcl  # noqa: F401

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json",)


def source_label(source) -> str:
    """Name used for a source in error messages."""
    return "<stdin>" if str(source) == "-" else str(source)


def parse_bytes(data: bytes, in_format: str = "detect", *, source_name: str = "<input>") -> Result:
    """Parse ``data`` as ``in_format``, raising ``ConversionError`` if nothing parses it."""
    res = resolve(data, in_format)
    if not res.success:
        raise ConversionError(describe_failure(res.errors, data, source_name), res.errors)
    return res


def convert(options: ConvertOptions) -> Result:
    """Read ``options.source``, parse it and write the canonical output."""
    if options.out_format.lower() not in OUTPUT_FORMATS:
        raise UnsupportedFormatError(options.out_format, OUTPUT_FORMATS)
    # fail on a bad format name before touching stdin
    _REGISTRY.candidates(options.in_format)

    with open_reader(options.source, options.buffer_size) as reader:
        data = reader.read_all()
    logger.debug("read %d bytes from %s", len(data), source_label(options.source))

    res = parse_bytes(data, options.in_format, source_name=source_label(options.source))
    text = encode_value(res.value, pretty=options.pretty)
    with open_writer(options.destination) as sink:
        sink.write(text)
        sink.write("\n")
    return res


__all__ = [
    "convert", "parse_bytes", "resolve", "locate", "encode_value",
    "ConvertOptions", "Result", "ParseAttemptError", "Diagnostic",
    "ConversionError", "EncodeError", "ParseError", "UnsupportedFormatError",
]
