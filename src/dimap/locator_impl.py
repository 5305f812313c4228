"""
Concrete implementation of Locator.
"""

from __future__ import annotations

from typing import Any

from .container import Container
from .errors import UnknownElementError
from .locator_base import Locator


class ContainerLocator(Locator):
    """Locator restricted to the local scope of one Container."""

    def __init__(self, container: Container):
        self._container = container

    def has(self, key: str) -> bool:
        return self._container.is_element_known_locally(key)

    def get(self, key: str) -> Any:
        return self._container.get_shared_local_element(key)

    def find(self, key: str) -> Any | None:
        try:
            return self.get(key)
        except UnknownElementError:
            return None
