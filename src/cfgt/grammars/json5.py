from __future__ import annotations

import re
from typing import Any, ClassVar

import json5

from ..core.grammar_base import Grammar
from ..core.model import ParseError
from ..core.util import byte_offset, decode_utf8, line_col_to_index

# json5 reports positions as "<string>:LINE Unexpected ... at column COL"
_POSITION_RE = re.compile(r":(\d+) (Unexpected .*) at column (\d+)")


class JSON5Grammar(Grammar):
    """JSON5: comments, trailing commas, unquoted keys, single quotes."""

    name: ClassVar = "json5"
    priority: ClassVar = 20

    @classmethod
    def parse(cls, data: bytes) -> Any:
        text = decode_utf8(data, "JSON5")
        try:
            return json5.loads(text)
        except ValueError as e:
            m = _POSITION_RE.search(str(e))
            if m is None:
                raise ParseError(f"unable to decode JSON5: {e}") from e
            line, reason, col = int(m.group(1)), m.group(2), int(m.group(3))
            index = line_col_to_index(text, line, col)
            raise ParseError(f"unable to decode JSON5: {reason}", offset=byte_offset(text, index)) from e
