"""
dimap - a dependency injection container driven by string-keyed element maps.

This library provides:
- Element maps of class names, creator functions and argument expressions
- Shared (memoized) and private (fresh) element resolution
- Element qualifiers parametrizing one definition into a family of elements
- Nested container scopes backed by submaps and parent delegation
- A read-only Locator facade over a container's local scope
"""

from .class_loader import ClassLoader
from .container import CONTAINER_KEY, Container
from .creator import ElementCreator
from .definition import ElementDefinition
from .errors import (
    BadElementDefinitionError,
    ContainerError,
    ElementCreationError,
    UnknownElementError,
)
from .expressions import ArgumentExpression, ExpressionKind
from .factory import Factory
from .keys import ElementKey
from .locator import create_container, create_locator
from .locator_base import Locator
from .locator_impl import ContainerLocator
from .resolver import ArgumentExpressionResolver

__all__ = [
    "ArgumentExpression",
    "ArgumentExpressionResolver",
    "BadElementDefinitionError",
    "CONTAINER_KEY",
    "ClassLoader",
    "Container",
    "ContainerError",
    "ContainerLocator",
    "ElementCreationError",
    "ElementCreator",
    "ElementDefinition",
    "ElementKey",
    "ExpressionKind",
    "Factory",
    "Locator",
    "UnknownElementError",
    "create_container",
    "create_locator",
]
