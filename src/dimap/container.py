"""
Shared element storage and the parent container delegation chain.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .errors import UnknownElementError

if TYPE_CHECKING:
    from .factory import Factory

logger = logging.getLogger(__name__)

CONTAINER_KEY = "Container"

_MISSING = object()


class Container:
    """
    Manages shared elements and delegates creation of new elements to its Factory.

    Supports container nesting: when a parent container is set, elements that
    this container neither holds nor can create are requested from the parent.
    The parent is only a delegation target; it does not know its children.
    """

    def __init__(self) -> None:
        self._shared_elements: dict[str, Any] = {}
        self._factory: Factory | None = None
        self._parent: Container | None = None
        self.set_shared_element(CONTAINER_KEY, self)

    @property
    def factory(self) -> Factory | None:
        return self._factory

    @property
    def parent(self) -> Container | None:
        return self._parent

    def has_parent(self) -> bool:
        return self._parent is not None

    def set_factory(self, factory: Factory) -> None:
        self._factory = factory

    def set_parent_container(self, parent: Container) -> None:
        self._parent = parent

    def create_child_container(self) -> Container:
        """Create an empty container for a nested scope, with this container as parent."""
        child = Container()
        child.set_parent_container(self)
        return child

    def set_shared_element(self, element_key: str, element: Any) -> None:
        """Register an existing element, replacing any element stored under the key."""
        self._shared_elements[element_key] = element

    def get_shared_element(self, element_key: str) -> Any:
        """
        Get an element by key, creating it if necessary.

        A created element is stored, so every subsequent call for the same key
        returns the same instance. If the element neither exists nor can be
        created locally, the parent container is asked for it.

        Args:
            element_key: The key of the element

        Returns:
            The shared element

        Raises:
            UnknownElementError: If neither this container nor any parent knows the key
        """
        element = self._try_getting_shared_local_element(element_key)
        if element is not _MISSING:
            return element

        if self._parent is None:
            raise UnknownElementError(element_key)

        logger.debug("Delegating shared element %s to parent container", element_key)
        return self._parent.get_shared_element(element_key)

    def get_shared_local_element(self, element_key: str) -> Any:
        """
        Get an element by key from this container's scope only.

        Created elements are shared just like with get_shared_element(); the
        parent container is never accessed.

        Raises:
            UnknownElementError: If the element is neither stored nor creatable locally
        """
        element = self._try_getting_shared_local_element(element_key)
        if element is _MISSING:
            raise UnknownElementError(element_key)
        return element

    def create_private_element(self, element_key: str) -> Any:
        """
        Create a new element that is not stored in or shared through the container.

        If the element cannot be created locally, the parent container is asked
        to create it.

        Raises:
            UnknownElementError: If neither this container nor any parent can create the element
        """
        if self._factory is not None and self._can_factory_create_element(element_key):
            return self._factory.create_element(element_key)

        if self._parent is None:
            raise UnknownElementError(element_key)

        logger.debug("Delegating private element %s to parent container", element_key)
        return self._parent.create_private_element(element_key)

    def is_element_known(self, element_key: str) -> bool:
        """Check whether this container or any of its parents holds or can create the element."""
        if self.is_element_known_locally(element_key):
            return True
        return self._parent is not None and self._parent.is_element_known(element_key)

    def is_element_known_locally(self, element_key: str) -> bool:
        """Check whether this container holds or can create the element, ignoring parents."""
        return element_key in self._shared_elements or self._can_factory_create_element(element_key)

    def get_shared_element_count(self) -> int:
        """Get the number of elements currently stored in this container."""
        return len(self._shared_elements)

    def __contains__(self, element_key: object) -> bool:
        return isinstance(element_key, str) and self.is_element_known(element_key)

    def _can_factory_create_element(self, element_key: str) -> bool:
        return self._factory is not None and self._factory.can_create_element(element_key)

    def _try_getting_shared_local_element(self, element_key: str) -> Any:
        if element_key in self._shared_elements:
            return self._shared_elements[element_key]

        if self._factory is None or not self._can_factory_create_element(element_key):
            return _MISSING

        element = self._factory.create_element(element_key)
        self._shared_elements[element_key] = element
        logger.debug("Stored shared element %s", element_key)
        return element
