"""
File Indexer

Recursively scans a directory tree for unit files that follow the
'<Name>/<Name><suffix>' convention.
"""

import logging
from pathlib import Path
from typing import List, Optional, Set, Union

from .resolver import DEFAULT_UNIT_SUFFIX

logger = logging.getLogger(__name__)


class FileIndexer:
    """
    Finds every convention-matching unit file beneath a directory.

    Each call to ``scan`` starts from an empty result; the accumulator is
    threaded through the recursion explicitly, so nothing is carried over
    between unrelated scans.
    """

    def __init__(self, suffix: str = DEFAULT_UNIT_SUFFIX):
        self.suffix = suffix

    def scan(self, root_dir: Union[str, Path]) -> List[Path]:
        """
        Scan a directory tree for unit files.

        Args:
            root_dir: Directory to scan, included in the search itself

        Returns:
            Unit file paths in discovery order, without duplicates. Empty
            if ``root_dir`` is not a directory.
        """
        root_dir = Path(root_dir)
        found: List[Path] = []
        if not root_dir.is_dir():
            logger.debug(f"Skipping scan of missing directory {root_dir}")
            return found

        self._scan_directory(root_dir, found, set(), set())
        logger.debug(f"Found {len(found)} unit files under {root_dir}")
        return found

    def _scan_directory(self, directory: Path, found: List[Path],
                        seen: Set[Path], visited: Set[Path]) -> None:
        real = directory.resolve()
        # Symlinked directories may loop back on themselves
        if real in visited:
            return
        visited.add(real)

        unit_file = self._unit_file(directory)
        if unit_file and unit_file not in seen:
            seen.add(unit_file)
            found.append(unit_file)

        # A dotted directory name cannot be a package segment
        subdirectories = sorted(
            item for item in directory.iterdir()
            if item.is_dir() and '.' not in item.name
        )

        for subdirectory in subdirectories:
            self._scan_directory(subdirectory, found, seen, visited)

    def _unit_file(self, directory: Path) -> Optional[Path]:
        candidate = directory / f"{directory.name}{self.suffix}"
        if candidate.is_file():
            return candidate
        return None
