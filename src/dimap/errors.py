"""
Exception types raised while resolving and creating elements.
"""

from __future__ import annotations


class ContainerError(Exception):
    """Base class for every error raised by the container."""


class UnknownElementError(ContainerError, LookupError):
    """Raised when an element key can be resolved neither locally nor by any parent."""

    def __init__(self, element_key: str):
        self.element_key = element_key
        super().__init__(f'Unknown element key "{element_key}"')


class BadElementDefinitionError(ContainerError, ValueError):
    """Raised when an element definition is structurally invalid for what is requested of it."""

    def __init__(self, element_alias: str, reason: str):
        self.element_alias = element_alias
        self.reason = reason
        super().__init__(f'Bad element definition "{element_alias}": {reason}')


class ElementCreationError(ContainerError, RuntimeError):
    """Raised when a valid element definition fails at creation time."""

    def __init__(self, element_alias: str, reason: str):
        self.element_alias = element_alias
        self.reason = reason
        super().__init__(f'Failed to create element "{element_alias}": {reason}')
