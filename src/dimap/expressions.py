"""
Argument expressions parsed from element definitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .keys import QUALIFIER_PLACEHOLDER

SHARED_REFERENCE_MARKER = "@"
PRIVATE_REFERENCE_MARKER = "#"


class ExpressionKind(Enum):
    """Kinds of argument expressions."""

    LITERAL = "literal"
    QUALIFIER = "qualifier"
    SHARED_REFERENCE = "shared_reference"
    PRIVATE_REFERENCE = "private_reference"


@dataclass(frozen=True)
class ArgumentExpression:
    """
    One constructor or creator argument, as written in an element definition.

    For references `value` holds the referenced key template (marker stripped),
    for literals the raw value, and for the qualifier placeholder it is unused.
    """

    kind: ExpressionKind
    value: Any = None

    @classmethod
    def parse(cls, raw: Any) -> ArgumentExpression:
        """Classify a raw argument expression."""
        if not isinstance(raw, str):
            return cls(ExpressionKind.LITERAL, raw)
        if raw == QUALIFIER_PLACEHOLDER:
            return cls(ExpressionKind.QUALIFIER)
        if len(raw) > 1:
            if raw[0] == SHARED_REFERENCE_MARKER:
                return cls(ExpressionKind.SHARED_REFERENCE, raw[1:])
            if raw[0] == PRIVATE_REFERENCE_MARKER:
                return cls(ExpressionKind.PRIVATE_REFERENCE, raw[1:])
        return cls(ExpressionKind.LITERAL, raw)

    @property
    def is_reference(self) -> bool:
        return self.kind in (ExpressionKind.SHARED_REFERENCE, ExpressionKind.PRIVATE_REFERENCE)

    def __str__(self) -> str:
        if self.kind is ExpressionKind.QUALIFIER:
            return QUALIFIER_PLACEHOLDER
        if self.kind is ExpressionKind.SHARED_REFERENCE:
            return f"{SHARED_REFERENCE_MARKER}{self.value}"
        if self.kind is ExpressionKind.PRIVATE_REFERENCE:
            return f"{PRIVATE_REFERENCE_MARKER}{self.value}"
        return repr(self.value)
