"""
Element map ownership and element creation by longest alias match.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .class_loader import ClassLoader
from .creator import ElementCreator
from .definition import ElementDefinition
from .errors import UnknownElementError
from .keys import ElementKey, alias_candidates
from .resolver import ArgumentExpressionResolver

if TYPE_CHECKING:
    from .container import Container

logger = logging.getLogger(__name__)


class Factory:
    """
    Creates elements according to their definitions in an element map.

    A Factory serves exactly one Container and attaches itself to it on
    construction. Element keys are matched against the map by longest alias:
    for "a.b.c" the aliases "a.b.c", "a.b" and "a" are tried in that order,
    and whatever follows the matched alias becomes the element qualifier.
    """

    def __init__(self, container: Container, class_loader: ClassLoader | None = None):
        self._container = container
        self._class_loader = class_loader if class_loader is not None else ClassLoader()
        self._element_map: dict[str, ElementDefinition] = {}
        container.set_factory(self)

    @property
    def class_loader(self) -> ClassLoader:
        return self._class_loader

    def set_element_map(self, element_map_source: Mapping[str, Any]) -> None:
        """
        Replace the element map.

        Args:
            element_map_source: {<element alias>: <element definition>, ...}

                An element definition is either a string naming a class, or a
                mapping with these optional fields (one of "class" or "creator"
                is required when the element is created):

                - class:   str, name of the class to instantiate
                - creator: callable returning the element
                - file:    str, path of a Python source file to include first
                - args:    list of argument expressions, or a single expression
                - submap:  nested element map, only visible to this element's
                           arguments and to the submap's own elements

                Argument expressions:

                - "$":        the qualifier the current element was requested with
                - "@Alias":   the shared element "Alias"
                - "@Alias.$": the shared element "Alias.<current qualifier>"
                - "#Alias":   a new private element "Alias"
                - "#Alias.$": a new private element "Alias.<current qualifier>"

                Any other value is passed through unmodified.

        Elements already shared by the container are kept.
        """
        self._element_map = {
            alias: ElementDefinition(definition_source, alias)
            for alias, definition_source in element_map_source.items()
        }
        logger.debug("Loaded element map with %d aliases", len(self._element_map))

    def get_element_aliases(self) -> list[str]:
        return list(self._element_map)

    def can_create_element(self, element_key: str) -> bool:
        return self.find_longest_matching_alias(element_key) is not None

    def create_element(self, element_key: str) -> Any:
        """
        Create a new element for the given key.

        Args:
            element_key: "alias" or "alias.qualifier"

        Returns:
            The newly created element

        Raises:
            UnknownElementError: If no alias of the element map matches the key
            BadElementDefinitionError: If the matched definition is malformed
            ElementCreationError: If the matched definition cannot be carried out
        """
        alias = self.find_longest_matching_alias(element_key)
        if alias is None:
            raise UnknownElementError(element_key)

        key = ElementKey.from_match(element_key, alias)
        definition = self._element_map[alias]

        if definition.has_submap():
            scope = self._create_child_container(definition.get_submap_source())
            logger.debug("Spawned submap scope for element %s", key)
        else:
            scope = self._container

        resolver = ArgumentExpressionResolver(scope, key.qualifier)
        logger.debug("Creating element %s (alias %s, qualifier %s)", element_key, alias, key.qualifier)
        return ElementCreator(definition, resolver, self._class_loader).create_element()

    def find_longest_matching_alias(self, element_key: str) -> str | None:
        """Find the longest registered alias that the key starts with, if any."""
        for candidate in alias_candidates(element_key):
            if candidate in self._element_map:
                return candidate
        return None

    def _create_child_container(self, element_map_source: Mapping[str, Any]) -> Container:
        child_container = self._container.create_child_container()
        child_factory = Factory(child_container, self._class_loader)
        child_factory.set_element_map(element_map_source)
        return child_container
