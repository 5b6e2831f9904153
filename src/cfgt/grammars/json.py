from __future__ import annotations

import json
from typing import Any, ClassVar

from ..core.grammar_base import Grammar
from ..core.model import ParseError
from ..core.util import byte_offset, decode_utf8


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid literal {name!r} (not allowed in strict JSON)")


class JSONGrammar(Grammar):
    """Strict RFC 8259 JSON."""

    name: ClassVar = "json"
    priority: ClassVar = 10

    @classmethod
    def parse(cls, data: bytes) -> Any:
        text = decode_utf8(data, "JSON")
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise ParseError(f"unable to decode JSON: {e.msg}", offset=byte_offset(text, e.pos)) from e
        except ValueError as e:
            raise ParseError(f"unable to decode JSON: {e}") from e
