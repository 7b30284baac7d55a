"""
Loaded Package Registry

Keeps track of every package name that has been loaded.
"""

import logging
from typing import List

logger = logging.getLogger(__name__)


class LoadedPackageRegistry:
    """
    Case-insensitive set of loaded package names.

    Names are stored lowercased in the order they were first added.
    Entries are never removed: once a package is loaded it stays loaded
    for the lifetime of the registry, even after its instance is released.
    """

    def __init__(self):
        self._packages: List[str] = []
        self._index = set()

    @staticmethod
    def normalize(package: str) -> str:
        return package.lower()

    def contains(self, package: str) -> bool:
        """Check whether a package was previously loaded"""
        return self.normalize(package) in self._index

    def add(self, package: str) -> None:
        """
        Mark a package as loaded.

        Adding a name that is already present is a no-op.
        """
        name = self.normalize(package)
        if name in self._index:
            return

        self._index.add(name)
        self._packages.append(name)
        logger.debug(f"Registered package {name} as loaded")

    def list(self) -> List[str]:
        """Get loaded package names, lowercased, in load order"""
        return list(self._packages)

    def __contains__(self, package: str) -> bool:
        return self.contains(package)

    def __len__(self) -> int:
        return len(self._packages)
