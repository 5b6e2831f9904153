from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List

DETECT = "detect"
DETECT_ALIASES = (DETECT, "*")
DEFAULT_BUFFER_SIZE = 16384


@dataclass(frozen=True, slots=True)
class ParseAttemptError:
    """Record of one grammar that failed to parse the input."""
    grammar: str
    message: str
    offset: int | None = None      # byte offset into the original input, if known


@dataclass(slots=True)
class Result:
    success: bool
    value: Any                     # only meaningful when success is True (None is JSON null)
    errors: List[ParseAttemptError] = field(default_factory=list)
    grammar: str | None = None     # name of the grammar that produced value


@dataclass(slots=True)
class ConvertOptions:
    source: str = "-"
    destination: str = "-"
    in_format: str = DETECT
    out_format: str = "json"
    pretty: bool = False
    buffer_size: int = DEFAULT_BUFFER_SIZE


class UnsupportedFormatError(RuntimeError):
    """Raised when a requested input or output format is not supported."""

    def __init__(self, name: str, supported: tuple[str, ...] = ()):
        self.name = name
        self.supported = supported
        msg = f"Unsupported format: {name!r}"
        if supported:
            msg += f" (expected one of: {', '.join(supported)})"
        super().__init__(msg)


class ParseError(RuntimeError):
    """Raised when a grammar cannot parse its input.

    ``offset`` is the zero-based byte offset of the syntax error within the
    original input, or ``None`` when the underlying parser does not say.
    """

    def __init__(self, message: str, offset: int | None = None):
        super().__init__(message)
        self.offset = offset


class ConversionError(RuntimeError):
    """Raised when no attempted grammar could parse the input."""

    def __init__(self, message: str, attempts: List[ParseAttemptError]):
        super().__init__(message)
        self.attempts = attempts


class EncodeError(RuntimeError):
    """Raised when a parsed value cannot be written in the output format."""
    pass
