"""
Construct-by-name support: a registry of type names and one-time source file inclusion.
"""

from __future__ import annotations

import hashlib
import importlib
import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class ClassLoader:
    """
    Resolves class names used in element definitions to classes.

    Names are looked up, in order, in:
    1. Classes registered explicitly with register()
    2. Names defined by source files included with include()
    3. Import paths, written "package.module:Name" or "package.module.Name"
    """

    def __init__(self) -> None:
        self._registered: dict[str, type] = {}
        self._included: dict[Path, dict[str, Any]] = {}

    def register(self, name: str, cls: type) -> None:
        """Make `cls` resolvable under `name`."""
        self._registered[name] = cls

    def is_included(self, path: str | Path) -> bool:
        return Path(path).resolve() in self._included

    def include(self, path: str | Path) -> None:
        """
        Execute a Python source file, once per resolved path and process.

        Names defined by the file become resolvable by load_class().

        Args:
            path: Path of the source file

        Raises:
            FileNotFoundError: If the path does not name an existing file
        """
        resolved = Path(path).resolve()
        if resolved in self._included:
            return
        if not resolved.is_file():
            raise FileNotFoundError(f"No such source file: {path}")

        digest = hashlib.sha1(str(resolved).encode()).hexdigest()[:12]
        module_name = f"_dimap_included_{resolved.stem}_{digest}"
        spec = importlib.util.spec_from_file_location(module_name, resolved)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load source file: {path}")

        # Another loader may already have executed the file
        module = sys.modules.get(module_name)
        if module is None:
            module = importlib.util.module_from_spec(spec)
            sys.modules[module_name] = module
            try:
                spec.loader.exec_module(module)
            except BaseException:
                del sys.modules[module_name]
                raise
            logger.debug("Included class file %s", resolved)
        self._included[resolved] = vars(module)

    def load_class(self, name: str) -> type:
        """
        Resolve a class name to a class.

        Args:
            name: Registered name, name defined by an included file, or import path

        Returns:
            The resolved class

        Raises:
            LookupError: If the name cannot be resolved
            TypeError: If the name resolves to something other than a class
        """
        found = self._find(name)
        if not inspect.isclass(found):
            raise TypeError(f"{name} is not a class")
        logger.debug("Resolved class name %s to %r", name, found)
        return found

    def _find(self, name: str) -> Any:
        if name in self._registered:
            return self._registered[name]

        # Files included last take precedence
        for namespace in reversed(self._included.values()):
            if name in namespace:
                return namespace[name]

        return self._import(name)

    @staticmethod
    def _import(name: str) -> Any:
        if ":" in name:
            module_name, _, qualname = name.partition(":")
        else:
            module_name, _, qualname = name.rpartition(".")
        if not module_name or not qualname:
            raise LookupError(f"Undefined class {name}")

        try:
            target: Any = importlib.import_module(module_name)
        except ImportError as e:
            raise LookupError(f"Undefined class {name}") from e

        for attribute in qualname.split("."):
            try:
                target = getattr(target, attribute)
            except AttributeError as e:
                raise LookupError(f"Undefined class {name}") from e
        return target
