"""
Creation of a single element from its definition.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .class_loader import ClassLoader
from .definition import ElementDefinition
from .errors import BadElementDefinitionError, ElementCreationError
from .resolver import ArgumentExpressionResolver

logger = logging.getLogger(__name__)


class ElementCreator:
    """Creates an element by class name or creator function, resolving its arguments first."""

    def __init__(
        self,
        definition: ElementDefinition,
        resolver: ArgumentExpressionResolver,
        class_loader: ClassLoader,
    ):
        """
        Args:
            definition: The definition of the element to create
            resolver: Resolves the element's argument expressions (its dependencies)
            class_loader: Loads class files and resolves class names
        """
        self._definition = definition
        self._resolver = resolver
        self._class_loader = class_loader

    def create_element(self) -> Any:
        """
        Create the element.

        Returns:
            The new element; creator functions may return any value

        Raises:
            ElementCreationError: If the class file or the class cannot be loaded
            BadElementDefinitionError: If the definition is malformed or names
                neither a class nor a creator
        """
        if self._definition.has_class_file():
            self._load_class_file(self._definition.get_class_file())

        arguments = self._resolver.resolve_all(self._definition.get_parsed_argument_expressions())

        class_name = self._definition.get_class_name()
        if class_name is not None:
            return self._create_by_class_name(class_name, arguments)

        creator = self._definition.get_creator_function()
        if creator is not None:
            return self._create_by_creator(creator, arguments)

        raise BadElementDefinitionError(self._definition.alias, 'Neither "class" nor "creator" specified')

    def _load_class_file(self, class_file: str | None) -> None:
        if class_file is None:
            return
        try:
            self._class_loader.include(class_file)
        except Exception as e:
            raise ElementCreationError(
                self._definition.alias, f"Class file {class_file} cannot be included"
            ) from e

    def _create_by_class_name(self, class_name: str, arguments: list[Any]) -> Any:
        try:
            cls = self._class_loader.load_class(class_name)
        except TypeError as e:
            raise ElementCreationError(self._definition.alias, f"{class_name} is not a class") from e
        except Exception as e:
            raise ElementCreationError(self._definition.alias, f"Undefined class {class_name}") from e

        logger.debug("Constructing %s for element %s", class_name, self._definition.alias)
        return cls(*arguments)

    def _create_by_creator(self, creator: Callable[..., Any], arguments: list[Any]) -> Any:
        return creator(*arguments)
