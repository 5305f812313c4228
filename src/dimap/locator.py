"""
Factory functions for creating containers and locators.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .class_loader import ClassLoader
from .container import Container
from .factory import Factory
from .locator_base import Locator
from .locator_impl import ContainerLocator


def create_container(
    element_map: Mapping[str, Any] | None = None,
    parent: Container | None = None,
    class_loader: ClassLoader | None = None,
) -> Container:
    """
    Create a container with an attached factory.

    Args:
        element_map: Element map to load into the factory
        parent: Parent container for elements not known locally
        class_loader: Class loader to resolve class names with (defaults to the
            parent factory's loader, or a new one)

    Returns:
        A new container
    """
    if class_loader is None and parent is not None and parent.factory is not None:
        class_loader = parent.factory.class_loader

    container = Container()
    factory = Factory(container, class_loader)
    factory.set_element_map(element_map or {})
    if parent is not None:
        container.set_parent_container(parent)
    return container


def create_locator(container: Container) -> Locator:
    """Create a read-only locator for the local scope of `container`."""
    return ContainerLocator(container)
