from __future__ import annotations
import logging

from .model import DETECT, ParseAttemptError, ParseError, Result
from .registry import GrammarRegistry, _REGISTRY

logger = logging.getLogger(__name__)


def resolve(data: bytes, requested_format: str = DETECT, *, registry: GrammarRegistry | None = None) -> Result:
    """Parse ``data`` with the requested grammar, or try each grammar in turn.

    Raises ``UnsupportedFormatError`` before any attempt if the format name is
    unknown. Otherwise never raises for malformed input: failures are returned
    in ``Result.errors`` in the order the grammars were tried.
    """
    registry = registry or _REGISTRY
    candidates = registry.candidates(requested_format)

    errors: list[ParseAttemptError] = []
    for grammar in candidates:
        logger.debug("trying %s grammar on %d bytes", grammar.name, len(data))
        try:
            value = grammar.parse(data)
        except ParseError as e:
            attempt = ParseAttemptError(grammar.name, str(e), e.offset)
        except Exception as e:
            attempt = ParseAttemptError(grammar.name, f"unexpected error: {e}")
        else:
            logger.debug("parsed input as %s", grammar.name)
            return Result(True, value, errors, grammar.name)
        logger.debug("%s grammar failed: %s (offset %s)", grammar.name, attempt.message, attempt.offset)
        errors.append(attempt)

    return Result(False, None, errors, None)
