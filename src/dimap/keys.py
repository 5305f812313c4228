"""
Element key parsing: alias candidates, qualifier extraction and substitution.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

KEY_SEPARATOR = "."
QUALIFIER_PLACEHOLDER = "$"


@dataclass(frozen=True)
class ElementKey:
    """An element key split into the matched alias and its qualifier remainder."""

    alias: str
    qualifier: str | None = None

    @classmethod
    def from_match(cls, element_key: str, alias: str) -> ElementKey:
        """Split `element_key` after an alias already known to match it."""
        return cls(alias, extract_qualifier(element_key, alias))

    def __str__(self) -> str:
        if self.qualifier is None:
            return self.alias
        return f"{self.alias}{KEY_SEPARATOR}{self.qualifier}"


def alias_candidates(element_key: str) -> Iterator[str]:
    """
    Yield the prefixes of an element key that may be registered aliases, longest first.

    "a.b.c" yields "a.b.c", "a.b", "a".
    """
    parts = element_key.split(KEY_SEPARATOR)
    while parts:
        yield KEY_SEPARATOR.join(parts)
        parts.pop()


def extract_qualifier(element_key: str, alias: str) -> str | None:
    """Return the part of `element_key` following `alias + "."`, or None."""
    prefix = alias + KEY_SEPARATOR
    if element_key.startswith(prefix):
        return element_key[len(prefix) :]
    return None


def substitute_qualifier(key_template: str, qualifier: str | None) -> str:
    """
    Replace a trailing ".$" in a referenced key with the current qualifier.

    Args:
        key_template: The referenced key, e.g. "Translator.$"
        qualifier: The qualifier of the element being created

    Returns:
        "Translator.<qualifier>", or "Translator" when the qualifier is None.
        Templates without a trailing ".$" are returned unchanged.
    """
    suffix = KEY_SEPARATOR + QUALIFIER_PLACEHOLDER
    if not key_template.endswith(suffix):
        return key_template
    base = key_template[: -len(suffix)]
    if qualifier is None:
        return base
    return f"{base}{KEY_SEPARATOR}{qualifier}"
