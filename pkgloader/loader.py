"""
Package Loader

Loads packages from the classpath, instantiates the class each one
defines and remembers which packages have been loaded.
"""

import logging
import warnings
from typing import Any, Iterable, List, Optional, Set, Union

from django.conf import settings

from . import signals
from .classpath import ClassPath, DEFAULT_SEPARATOR
from .exceptions import (
    PackageNotFoundError, SymbolNotFoundError, PackageAlreadyLoadedWarning
)
from .indexer import FileIndexer
from .registry import LoadedPackageRegistry
from .resolver import (
    NameResolver, ResolvedLocation, DEFAULT_UNIT_SUFFIX, is_wildcard
)
from .superpackage import SuperpackageExpander
from .units import UnitLoader

logger = logging.getLogger(__name__)


class PackageSlot:
    """
    Holder a load result can be written into instead of being returned.

    ``unload`` clears the slot.
    """

    def __init__(self, value: Any = None):
        self.value = value
        self.package: Optional[str] = None

    def __bool__(self):
        return self.value is not None

    def __repr__(self):
        return f"<PackageSlot {self.package!r}: {self.value!r}>"


class PackageLoader:
    """
    Owns the classpath and the loaded-package registry and performs loads.

    Each loader is an independent context; the process-wide one is
    ``package_loader``, seeded from Django settings.
    """

    def __init__(self, classpath: Union[str, Iterable[str], None] = None,
                 suffix: Optional[str] = None, separator: Optional[str] = None):
        if suffix is None:
            suffix = getattr(settings, 'PACKAGE_UNIT_SUFFIX', DEFAULT_UNIT_SUFFIX)
        if separator is None:
            separator = getattr(settings, 'PACKAGE_CLASSPATH_SEPARATOR', DEFAULT_SEPARATOR)

        self.classpath = ClassPath(separator=separator)
        self.registry = LoadedPackageRegistry()
        self.resolver = NameResolver(suffix)
        self.indexer = FileIndexer(suffix)
        self.units = UnitLoader()

        if classpath:
            self.classpath.add(classpath)

    @classmethod
    def from_settings(cls) -> 'PackageLoader':
        """Build a loader whose classpath comes from PACKAGE_CLASSPATH"""
        return cls(classpath=getattr(settings, 'PACKAGE_CLASSPATH', None))

    # Classpath

    def set_class_path(self, path: Union[str, Iterable[str]]) -> None:
        """Append one or more roots to the classpath"""
        self.classpath.add(path)

    def get_class_path(self, as_list: bool = True) -> Union[List[str], str]:
        """
        Get the current classpath.

        Args:
            as_list: Return a list of roots if True, otherwise a single
                string joined by the classpath separator
        """
        if as_list:
            return self.classpath.list()
        return self.classpath.joined()

    # Loading

    def load(self, package: str, into: Optional[PackageSlot] = None):
        """
        Load a package, or every package under a superpackage.

        Args:
            package: Dotted package name, e.g. 'tld.domain.Widget', or a
                superpackage such as 'tld.domain.*'
            into: Optional slot that receives the result instead of it
                being returned

        Returns:
            The new instance, or a mapping of instances for a superpackage.
            None if the package was already loaded or ``into`` was given.

        Raises:
            PackageNotFoundError: If no root contains the package
            SymbolNotFoundError: If the unit defines no expected class
            PackageLoadError: If the unit file fails to execute
        """
        if self.is_loaded(package):
            self.reject(package)
            return None

        if is_wildcard(package):
            result = SuperpackageExpander(self).load_all(package)
        else:
            result = self.load_single(package)

        if into is not None:
            into.value = result
            into.package = package
            return None
        return result

    def is_loaded(self, package: str) -> bool:
        """Check if a package was previously loaded"""
        return self.registry.contains(package)

    def get_loaded_packages(self) -> List[str]:
        """Get the names of loaded packages, lowercased, in load order"""
        return self.registry.list()

    def unload(self, slot: PackageSlot) -> None:
        """
        Release the instance held by a slot.

        The package stays registered as loaded and cannot be loaded again.
        """
        package = slot.package
        slot.value = None
        if package:
            signals.package_unloaded.send(sender=self.__class__, package=package)
            logger.info(f"Unloaded package {package}")

    def locate(self, package: str) -> ResolvedLocation:
        """
        Find the unit file of a plain package across the classpath.

        Roots are searched in order and the first one holding the unit
        file wins.

        Raises:
            PackageNotFoundError: If no root contains the unit file
        """
        for root in self.classpath:
            location = self.resolver.locate(root, package)
            logger.debug(f"Looking for {package} at {location.unit_file}")
            if location.directory.is_dir() and location.unit_file.is_file():
                return location

        logger.error(f"Package {package} not found on classpath {self.classpath.joined()}")
        raise PackageNotFoundError(f"Package {package} not found on CLASSPATH")

    def load_single(self, package: str) -> Any:
        """Locate, load, instantiate and register one plain package"""
        location = self.locate(package)
        symbols = self.units.load(location.unit_file)

        candidates = self.resolver.symbol_candidates(package)
        resolved = symbols.resolve(candidates)
        if resolved is None:
            logger.error(
                f"Unit {location.unit_file} defines none of {candidates} "
                f"(found {symbols.names()})"
            )
            raise SymbolNotFoundError(package, candidates)

        symbol, factory = resolved
        instance = factory()

        self.registry.add(package)
        signals.package_loaded.send(
            sender=self.__class__,
            package=package,
            instance=instance,
            path=location.unit_file,
        )
        logger.info(f"Loaded package {package} as {symbol} from {location.root}")
        return instance

    def reject(self, package: str) -> None:
        """Report a load refused because the package is already loaded"""
        message = f"Package {package} was previously loaded."
        logger.warning(message)
        signals.package_rejected.send(sender=self.__class__, package=package)
        warnings.warn(message, PackageAlreadyLoadedWarning, stacklevel=2)

    # Discovery

    def get_available_packages(self) -> List[str]:
        """
        Scan every root for packages that could be loaded.

        Returns:
            Dotted package names in discovery order without duplicates,
            or an empty list if the classpath holds no packages
        """
        packages: List[str] = []
        seen: Set[str] = set()
        for root in self.classpath:
            for unit_file in self.indexer.scan(root):
                package = self.resolver.package_for_unit(root, unit_file)
                if package and package not in seen:
                    seen.add(package)
                    packages.append(package)
        return packages


# Global loader instance
package_loader = PackageLoader.from_settings()
