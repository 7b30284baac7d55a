"""
Name Resolver

Maps dotted package names onto the on-disk unit convention:

    <root>/<dir1>/<dir2>/.../<UnitName>/<UnitName><suffix>

and produces the symbol names a unit may define for its package.
"""

from pathlib import Path
from typing import Callable, List, NamedTuple, Optional, Tuple, Union

from .exceptions import InvalidPackageNameError

DEFAULT_UNIT_SUFFIX = '.py'
WILDCARD = '*'


class PackageName(NamedTuple):
    """A plain package name split into its directory segments and unit name"""
    package: str
    directories: Tuple[str, ...]
    unit: str

    @property
    def directory(self) -> Path:
        return Path(*self.directories)


class ResolvedLocation(NamedTuple):
    """Where a package's unit file would live under one search root"""
    root: Path
    directory: Path
    unit_file: Path


def is_wildcard(package: str) -> bool:
    """Check whether a package name is a superpackage (ends in '*')"""
    return package.endswith(WILDCARD)


def split_package(package: str) -> PackageName:
    """
    Split a plain dotted name into directory segments and unit name.

    Raises:
        InvalidPackageNameError: If the name is empty or has empty segments
    """
    if not package or is_wildcard(package):
        raise InvalidPackageNameError(f"Invalid package name: {package!r}")

    segments = package.split('.')
    if not all(segments):
        raise InvalidPackageNameError(f"Invalid package name: {package!r}")

    return PackageName(package, tuple(segments[:-1]), segments[-1])


def strip_wildcard(package: str) -> str:
    """
    Drop the trailing '.*' from a superpackage name.

    'tld.domain.*' becomes 'tld.domain'; a bare '*' becomes ''.

    Raises:
        InvalidPackageNameError: If the '*' is not its own segment or the
            base has empty segments
    """
    if package == WILDCARD:
        return ''

    if not package.endswith(f".{WILDCARD}"):
        raise InvalidPackageNameError(f"Invalid package name: {package!r}")

    base = package[:-len(WILDCARD) - 1]
    if not base or not all(base.split('.')):
        raise InvalidPackageNameError(f"Invalid package name: {package!r}")
    return base


def package_directory(package: str) -> Path:
    """Turn a dotted name into a relative directory path"""
    return Path(*package.split('.')) if package else Path()


def unit_name_symbol(name: PackageName) -> str:
    return name.unit


def qualified_symbol(name: PackageName) -> str:
    return '_'.join(name.directories + (name.unit,))


# Tried in order; the first candidate the unit defines wins
NAMING_STRATEGIES: Tuple[Callable[[PackageName], str], ...] = (
    unit_name_symbol,
    qualified_symbol,
)


class NameResolver:
    """
    Resolves package names to candidate unit files and symbol names.
    """

    def __init__(self, suffix: str = DEFAULT_UNIT_SUFFIX,
                 strategies: Optional[Tuple[Callable[[PackageName], str], ...]] = None):
        self.suffix = suffix
        self.strategies = strategies or NAMING_STRATEGIES

    def unit_filename(self, unit: str) -> str:
        return f"{unit}{self.suffix}"

    def locate(self, root: Union[str, Path], package: str) -> ResolvedLocation:
        """
        Build the candidate location of a package under one root.

        Args:
            root: Search root
            package: Plain dotted package name

        Returns:
            ResolvedLocation with the unit's own directory and unit file path
        """
        name = split_package(package)
        root = Path(root)
        directory = root / name.directory / name.unit
        unit_file = directory / self.unit_filename(name.unit)
        return ResolvedLocation(root, directory, unit_file)

    def symbol_candidates(self, package: str) -> List[str]:
        """
        Get the symbol names a package's unit may define, in priority order.

        One name per strategy. For a single-segment package both strategies
        yield the unit name, and it is listed twice.
        """
        name = split_package(package)
        return [strategy(name) for strategy in self.strategies]

    def package_for_unit(self, root: Union[str, Path], unit_file: Path) -> str:
        """
        Derive the dotted package name of a unit file found under a root.

        '<root>/tld/domain/Widget/Widget.py' becomes 'tld.domain.Widget'.
        Case is preserved.
        """
        relative = Path(unit_file).parent.relative_to(root)
        return '.'.join(relative.parts)
