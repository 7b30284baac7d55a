"""
Unit Loading

Executes unit files at most once per process and keeps a table of the
classes each unit defines, so packages can be instantiated by symbol name.
"""

import hashlib
import importlib.util
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import Dict, Iterable, Optional, Tuple, Type, Union

from .exceptions import PackageLoadError

logger = logging.getLogger(__name__)

UNIT_MODULE_PREFIX = 'pkgloader_unit_'


def unit_module_name(path: Union[str, Path]) -> str:
    """Synthetic module name for a unit file, stable for its real path"""
    digest = hashlib.sha1(str(Path(path).resolve()).encode('utf-8')).hexdigest()
    return f"{UNIT_MODULE_PREFIX}{digest[:16]}"


class SymbolTable:
    """
    Constructors defined by one unit, looked up by name.

    Exact names are preferred; a case-insensitive match is accepted as a
    fallback.
    """

    def __init__(self, module: ModuleType):
        self.module = module
        self._symbols: Dict[str, Type] = {}
        self._folded: Dict[str, str] = {}

        for attr_name, attr in vars(module).items():
            if isinstance(attr, type) and attr.__module__ == module.__name__:
                self._symbols[attr_name] = attr
                self._folded.setdefault(attr_name.lower(), attr_name)

    def get(self, name: str) -> Optional[Type]:
        if name in self._symbols:
            return self._symbols[name]
        folded = self._folded.get(name.lower())
        return self._symbols[folded] if folded else None

    def resolve(self, candidates: Iterable[str]) -> Optional[Tuple[str, Type]]:
        """Return the first candidate defined by the unit, with its constructor"""
        for candidate in candidates:
            factory = self.get(candidate)
            if factory is not None:
                return candidate, factory
        return None

    def names(self):
        return list(self._symbols)


class UnitLoader:
    """
    Loads unit files through importlib.

    Executed modules live in ``sys.modules`` under a name derived from the
    file's real path, so a file reached through a second root, a symlink or
    another loader instance is never executed again.
    """

    def __init__(self):
        self._tables: Dict[str, SymbolTable] = {}

    def load(self, path: Union[str, Path]) -> SymbolTable:
        """
        Load a unit file (once) and return its symbol table.

        Args:
            path: Path to the unit file

        Returns:
            SymbolTable for the unit

        Raises:
            PackageLoadError: If the unit cannot be executed
        """
        name = unit_module_name(path)
        if name in self._tables:
            return self._tables[name]

        module = sys.modules.get(name)
        if module is None:
            module = self._execute(name, path)
        else:
            logger.debug(f"Unit {path} already executed as {name}")

        table = SymbolTable(module)
        self._tables[name] = table
        return table

    def _execute(self, name: str, path: Union[str, Path]) -> ModuleType:
        spec = importlib.util.spec_from_file_location(name, path)
        if not spec or not spec.loader:
            raise PackageLoadError(f"Failed to create import spec for {path}")

        module = importlib.util.module_from_spec(spec)

        # Registered before execution so the unit can import itself
        sys.modules[name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            sys.modules.pop(name, None)
            logger.error(f"Failed to load unit {path}: {e}")
            raise PackageLoadError(f"Failed to load unit {path}: {e}") from e

        logger.debug(f"Executed unit {path} as {name}")
        return module
