from __future__ import annotations
import bisect
from typing import Dict, List, Type

from .grammar_base import Grammar
from .model import DETECT_ALIASES, UnsupportedFormatError


class GrammarRegistry:
    def __init__(self) -> None:
        self._by_name: Dict[str, Type[Grammar]] = {}
        self._grammars: List[tuple[int, str, Type[Grammar]]] = []   # sorted by priority

    # called from Grammar.__init_subclass__
    def register(self, grammar_cls: Type[Grammar]) -> None:
        # Use (priority, name, grammar_cls) to ensure stable sorting
        entry = (grammar_cls.priority, grammar_cls.name, grammar_cls)
        bisect.insort(self._grammars, entry, key=lambda e: e[:2])
        for key in (grammar_cls.name, *grammar_cls.aliases):
            self._by_name[key.lower()] = grammar_cls

    @property
    def grammars(self) -> list[Type[Grammar]]:
        """All registered grammars in detect-mode priority order."""
        return [g for _, _, g in self._grammars]

    def names(self) -> tuple[str, ...]:
        """Every accepted format name, detect sentinels first."""
        return (*DETECT_ALIASES, *(g.name for g in self.grammars))

    def get(self, name: str) -> Type[Grammar]:
        grammar = self._by_name.get(name.lower())
        if grammar is None:
            raise UnsupportedFormatError(name, self.names())
        return grammar

    def candidates(self, requested: str) -> list[Type[Grammar]]:
        """Grammars to try, in order, for a requested format name."""
        if requested.lower() in DETECT_ALIASES:
            return self.grammars
        return [self.get(requested)]


# singleton used project-wide
_REGISTRY = GrammarRegistry()
