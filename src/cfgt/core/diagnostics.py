"""Turn byte offsets from failed parses into line/column diagnostics."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from .model import ParseAttemptError

LINE_PREFIX = "{:5d}: "
PREFIX_WIDTH = len(LINE_PREFIX.format(0))


@dataclass(frozen=True, slots=True)
class Diagnostic:
    line: int        # 1-based
    column: int      # 1-based, in characters
    snippet: str     # previous line, offending line, caret line


def _text(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace").rstrip("\r")


def locate(data: bytes, offset: int) -> Diagnostic:
    """Compute line, column and a caret snippet for ``offset`` into ``data``.

    Offsets outside the input are clamped: negative to 0, past the end to the
    end of input.
    """
    offset = max(0, min(offset, len(data)))

    line = data.count(b"\n", 0, offset) + 1
    line_start = data.rfind(b"\n", 0, offset) + 1
    line_end = data.find(b"\n", offset)
    if line_end == -1:
        line_end = len(data)

    head = data[line_start:offset].decode("utf-8", errors="replace")
    column = len(head) + 1

    rows = []
    if line > 1:
        prev_end = line_start - 1
        prev_start = data.rfind(b"\n", 0, prev_end) + 1
        rows.append(LINE_PREFIX.format(line - 1) + _text(data[prev_start:prev_end]))
    rows.append(LINE_PREFIX.format(line) + _text(data[line_start:line_end]))
    # keep tabs so the caret lines up with the rendered line above it
    pad = "".join("\t" if ch == "\t" else " " for ch in head)
    rows.append(" " * PREFIX_WIDTH + pad + "^")

    return Diagnostic(line, column, "\n".join(rows))


def describe_attempt(attempt: ParseAttemptError, data: bytes, source_name: str) -> str:
    """Render one failed attempt, with a syntax-error block when it has an offset."""
    msg = f'unable to parse "{source_name}" as "{attempt.grammar}": {attempt.message}'
    if attempt.offset is None:
        return msg
    diag = locate(data, attempt.offset)
    return (
        f"{msg}\n"
        f"Syntax error at line {diag.line}, column {diag.column} (offset {attempt.offset}):\n"
        f"{diag.snippet}"
    )


def describe_failure(attempts: Sequence[ParseAttemptError], data: bytes, source_name: str) -> str:
    """Render every failed attempt, in the order the grammars were tried."""
    blocks = [describe_attempt(a, data, source_name) for a in attempts]
    if len(blocks) == 1:
        return blocks[0]
    tried = ", ".join(f'"{a.grammar}"' for a in attempts)
    header = f'unable to parse "{source_name}" in any supported format (tried {tried}):'
    return header + "\n" + "\n\n".join(blocks)
