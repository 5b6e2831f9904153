from abc import ABC, abstractmethod
from typing import Any, ClassVar


class Grammar(ABC):
    # --- required by subclasses ---
    name: ClassVar[str]                      # canonical format name, e.g. "json"
    aliases: ClassVar[tuple[str, ...]] = ()  # extra names accepted for --in-format
    priority: ClassVar[int] = 100            # lower = tried earlier in detect mode

    @classmethod
    @abstractmethod
    def parse(cls, data: bytes) -> Any:
        """Parse the whole of ``data`` into a plain JSON-model value.

        Raise ``ParseError`` (with a byte offset when one is known) on failure.
        """
        ...

    # --- registry hook ---
    def __init_subclass__(cls, register: bool = True, **kw):
        super().__init_subclass__(**kw)
        if register:
            from .registry import _REGISTRY
            _REGISTRY.register(cls)           # noqa: E402
