from __future__ import annotations
import json
from typing import Any

from .model import EncodeError, ParseError


def decode_utf8(data: bytes, label: str) -> str:
    """Decode input bytes, reporting the first bad byte as a ParseError."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"unable to decode {label}: invalid UTF-8 byte", offset=e.start) from e


def byte_offset(text: str, index: int) -> int:
    """Translate a character index into ``text`` to a UTF-8 byte offset."""
    index = max(0, min(index, len(text)))
    return len(text[:index].encode("utf-8"))


def line_col_to_index(text: str, line: int, col: int) -> int:
    """Translate a 1-based (line, column) pair to a character index into ``text``."""
    index = 0
    for _ in range(line - 1):
        nl = text.find("\n", index)
        if nl == -1:
            return len(text)
        index = nl + 1
    return min(index + max(col, 1) - 1, len(text))


def encode_value(value: Any, *, pretty: bool = False) -> str:
    """Serialise a parsed value as canonical JSON (no trailing newline)."""
    try:
        if pretty:
            return json.dumps(value, indent=4, ensure_ascii=False, allow_nan=False)
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise EncodeError(f"unable to encode: {e}") from e
