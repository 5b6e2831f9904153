from __future__ import annotations

from typing import Any, ClassVar

import hcl2

from ..core.grammar_base import Grammar
from ..core.model import ParseError
from ..core.util import byte_offset, decode_utf8

# plain JSON-model output: unquoted strings, no block markers or comment keys
_PLAIN = hcl2.SerializationOptions(
    strip_string_quotes=True,
    explicit_blocks=False,
    with_comments=False,
)


class HCLGrammar(Grammar):
    """HashiCorp Configuration Language (block-structured)."""

    name: ClassVar = "hcl"
    aliases: ClassVar = ("hcl2",)
    priority: ClassVar = 30

    @classmethod
    def parse(cls, data: bytes) -> Any:
        text = decode_utf8(data, "HCL")
        # the grammar wants a terminating newline; appending one leaves offsets intact
        if not text.endswith("\n"):
            text += "\n"
        try:
            return hcl2.loads(text, serialization_options=_PLAIN)
        except Exception as e:
            # lark's UnexpectedInput carries pos_in_stream; other failures have no position
            pos = getattr(e, "pos_in_stream", None)
            lines = str(e).strip().splitlines()
            reason = lines[0] if lines else type(e).__name__
            offset = None
            if isinstance(pos, int) and pos >= 0:
                offset = min(byte_offset(text, pos), len(data))
            raise ParseError(f"unable to decode HCL: {reason}", offset=offset) from e
