"""
Classpath

Ordered collection of filesystem roots searched for packages.
"""

import logging
import os
from typing import Iterator, List, Union, Iterable

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = ';'


class ClassPath:
    """
    Ordered list of search roots.

    Roots are only ever appended. Insertion order is search priority, so
    the first root that holds a package wins. Duplicates are kept and
    nothing is checked against the filesystem when a root is added.
    """

    def __init__(self, roots: Union[str, Iterable[str], None] = None,
                 separator: str = DEFAULT_SEPARATOR):
        self._roots: List[str] = []
        self.separator = separator
        if roots:
            self.add(roots)

    def add(self, roots: Union[str, Iterable[str]]) -> None:
        """
        Append one root or a sequence of roots.

        Args:
            roots: A single path or an iterable of paths
        """
        if isinstance(roots, str) or hasattr(roots, '__fspath__'):
            roots = [roots]

        for root in roots:
            root = os.fspath(root)
            self._roots.append(root)
            logger.debug(f"Added {root} to classpath")

    def list(self) -> List[str]:
        """Return a copy of the roots in search order"""
        return list(self._roots)

    def joined(self, separator: str = None) -> str:
        """Return the roots joined by ``separator`` (';' unless configured)"""
        if separator is None:
            separator = self.separator
        return separator.join(self._roots)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._roots))

    def __len__(self) -> int:
        return len(self._roots)

    def __repr__(self) -> str:
        return f"<ClassPath {self.joined()!r}>"
