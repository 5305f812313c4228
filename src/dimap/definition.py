"""
Normalization and lazy validation of a single element definition.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .errors import BadElementDefinitionError
from .expressions import ArgumentExpression

FILE_FIELD = "file"
CLASS_FIELD = "class"
CREATOR_FIELD = "creator"
ARGS_FIELD = "args"
SUBMAP_FIELD = "submap"


class ElementDefinition:
    """
    A recipe for creating one element, as registered under an alias in an element map.

    The raw source is either a mapping with the optional fields "file", "class",
    "creator", "args" and "submap", or a string naming a class (shorthand for
    {"class": <string>}). Field types are only checked when a field is read, so
    a malformed definition fails when its element is first created, not when
    the element map is loaded.
    """

    def __init__(self, source: Mapping[str, Any] | str | Any, alias: str):
        """
        Create a definition from its raw source.

        Args:
            source: The element definition as received from the element map
            alias: The alias the definition is registered under, for error messages
        """
        if isinstance(source, Mapping):
            self._source: dict[str, Any] = dict(source)
        elif isinstance(source, str):
            self._source = {CLASS_FIELD: source}
        else:
            self._source = {}
        self._alias = alias
        self._arguments = tuple(ArgumentExpression.parse(raw) for raw in self.get_argument_expressions())

    @property
    def alias(self) -> str:
        return self._alias

    def _has(self, field: str) -> bool:
        return self._source.get(field) is not None

    def has_class_file(self) -> bool:
        return self._has(FILE_FIELD)

    def get_class_file(self) -> str | None:
        """Path of a source file to include before creating the element."""
        class_file = self._source.get(FILE_FIELD)
        if class_file is not None and not isinstance(class_file, str):
            raise BadElementDefinitionError(self._alias, "Class file is not a string")
        return class_file

    def has_class_name(self) -> bool:
        return self._has(CLASS_FIELD)

    def get_class_name(self) -> str | None:
        class_name = self._source.get(CLASS_FIELD)
        if class_name is not None and not isinstance(class_name, str):
            raise BadElementDefinitionError(self._alias, "Class name is not a string")
        return class_name

    def has_creator_function(self) -> bool:
        return self._has(CREATOR_FIELD)

    def get_creator_function(self) -> Callable[..., Any] | None:
        creator = self._source.get(CREATOR_FIELD)
        if creator is not None and not callable(creator):
            raise BadElementDefinitionError(self._alias, "Creator is not callable")
        return creator

    def has_submap(self) -> bool:
        """Check whether the definition carries a non-empty submap."""
        return bool(self._source.get(SUBMAP_FIELD))

    def get_submap_source(self) -> Mapping[str, Any]:
        submap = self._source.get(SUBMAP_FIELD)
        if submap is None:
            return {}
        if not isinstance(submap, Mapping):
            raise BadElementDefinitionError(self._alias, "Submap is not a mapping")
        return submap

    def get_argument_expressions(self) -> tuple[Any, ...]:
        """
        Get the raw argument expressions in order.

        A missing "args" field yields no arguments, and a value that is not a
        list or tuple is a single argument.
        """
        args = self._source.get(ARGS_FIELD)
        if args is None:
            return ()
        if isinstance(args, (list, tuple)):
            return tuple(args)
        return (args,)

    def get_parsed_argument_expressions(self) -> tuple[ArgumentExpression, ...]:
        return self._arguments

    def __repr__(self) -> str:
        return f"ElementDefinition({self._alias!r}, {self._source!r})"
