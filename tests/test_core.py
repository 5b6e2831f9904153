import pytest
from typing import Any, ClassVar

from cfgt.core.grammar_base import Grammar
from cfgt.core.model import EncodeError, ParseError, UnsupportedFormatError
from cfgt.core.registry import _REGISTRY, GrammarRegistry
from cfgt.core.util import byte_offset, decode_utf8, encode_value, line_col_to_index


class DummyGrammar(Grammar, register=False):
    """Test grammar for unit tests."""
    name: ClassVar[str] = "dummy"
    aliases: ClassVar[tuple[str, ...]] = ("dmy",)
    priority: ClassVar[int] = 50

    @classmethod
    def parse(cls, data: bytes) -> Any:
        return {"dummy": True}


class HighPriorityGrammar(Grammar, register=False):
    """Higher priority test grammar."""
    name: ClassVar[str] = "high"
    priority: ClassVar[int] = 10

    @classmethod
    def parse(cls, data: bytes) -> Any:
        raise ParseError("never parses", offset=0)


class TestGrammarRegistry:
    """Test the grammar registry functionality."""

    def test_builtin_grammars_registered_in_priority_order(self):
        """json, json5 and hcl are registered at import time, strict first."""
        import cfgt  # noqa: F401

        assert [g.name for g in _REGISTRY.grammars] == ["json", "json5", "hcl"]

    def test_register_false_keeps_global_registry_clean(self):
        """Test grammars declared with register=False are not auto-registered."""
        import cfgt  # noqa: F401

        with pytest.raises(UnsupportedFormatError):
            _REGISTRY.get("dummy")

    def test_lookup_by_name_and_alias(self):
        registry = GrammarRegistry()
        registry.register(DummyGrammar)

        assert registry.get("dummy") is DummyGrammar
        assert registry.get("dmy") is DummyGrammar
        assert registry.get("DUMMY") is DummyGrammar

    def test_priority_ordering(self):
        """Lower priority numbers are tried first regardless of registration order."""
        registry = GrammarRegistry()
        registry.register(DummyGrammar)  # priority 50
        registry.register(HighPriorityGrammar)  # priority 10

        assert registry.grammars == [HighPriorityGrammar, DummyGrammar]

    def test_detect_candidates(self):
        registry = GrammarRegistry()
        registry.register(DummyGrammar)
        registry.register(HighPriorityGrammar)

        assert registry.candidates("detect") == [HighPriorityGrammar, DummyGrammar]
        assert registry.candidates("*") == [HighPriorityGrammar, DummyGrammar]

    def test_explicit_candidate(self):
        registry = GrammarRegistry()
        registry.register(DummyGrammar)
        registry.register(HighPriorityGrammar)

        assert registry.candidates("dummy") == [DummyGrammar]

    def test_unsupported_format_error(self):
        """Test that UnsupportedFormatError is raised for unknown names."""
        registry = GrammarRegistry()
        registry.register(DummyGrammar)

        with pytest.raises(UnsupportedFormatError, match="Unsupported format: 'yaml'") as exc_info:
            registry.candidates("yaml")
        assert exc_info.value.name == "yaml"
        assert "dummy" in exc_info.value.supported

    def test_names(self):
        registry = GrammarRegistry()
        registry.register(DummyGrammar)

        assert registry.names() == ("detect", "*", "dummy")


class TestEncodeValue:
    """Test the encode_value utility function."""

    def test_compact(self):
        assert encode_value({"a": [1, 2.5, None, True]}) == '{"a":[1,2.5,null,true]}'

    def test_pretty(self):
        assert encode_value({"a": 1}, pretty=True) == '{\n    "a": 1\n}'

    def test_non_ascii_kept(self):
        assert encode_value({"name": "café"}) == '{"name":"café"}'

    def test_non_finite_rejected(self):
        with pytest.raises(EncodeError, match="unable to encode"):
            encode_value({"a": float("inf")})


class TestOffsetHelpers:
    """Test text position helpers."""

    def test_byte_offset_ascii(self):
        assert byte_offset("hello", 3) == 3

    def test_byte_offset_multibyte(self):
        # "é" is two bytes in UTF-8
        assert byte_offset("aé b", 3) == 4

    def test_byte_offset_clamped(self):
        assert byte_offset("abc", 10) == 3
        assert byte_offset("abc", -1) == 0

    def test_line_col_to_index(self):
        text = "ab\ncde\nf"
        assert line_col_to_index(text, 1, 1) == 0
        assert line_col_to_index(text, 2, 2) == 4
        assert line_col_to_index(text, 3, 1) == 7

    def test_line_col_past_end(self):
        assert line_col_to_index("ab\ncd", 5, 1) == 5
        assert line_col_to_index("ab", 1, 10) == 2

    def test_decode_utf8_error_offset(self):
        with pytest.raises(ParseError) as exc_info:
            decode_utf8(b'{"a": "\xff"}', "JSON")
        assert exc_info.value.offset == 7
        assert "invalid UTF-8" in str(exc_info.value)
