"""
Abstract read-only Locator interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Locator(ABC):
    """
    Read-only access to the elements of one container scope.

    A locator can be handed to code that should look elements up but never
    register or create private elements, nor reach into parent scopes.
    """

    @abstractmethod
    def has(self, key: str) -> bool:
        """
        Check if an element can be provided for the given key.

        Args:
            key: The element key

        Returns:
            True if the element exists or can be created in this scope
        """

    @abstractmethod
    def get(self, key: str) -> Any:
        """
        Get the element for the given key.

        Args:
            key: The element key

        Returns:
            The shared element

        Raises:
            UnknownElementError: If the element is unknown in this scope
        """

    @abstractmethod
    def find(self, key: str) -> Any | None:
        """Try to get an element, returning None if the key is unknown."""
