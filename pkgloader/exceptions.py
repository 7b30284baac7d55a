"""
Package Loader Exceptions

Custom exceptions and warnings for the package loader.
"""


class PackageError(Exception):
    """Base exception for package loader errors"""
    pass


class InvalidPackageNameError(PackageError):
    """Raised when a package name is empty or has empty segments"""
    pass


class PackageNotFoundError(PackageError):
    """Raised when no classpath root contains the package's unit file"""
    pass


class PackageLoadError(PackageError):
    """Raised when a unit file fails while being executed"""
    pass


class SymbolNotFoundError(PackageError):
    """
    Raised when a unit file loads but defines none of the expected symbols.

    The attempted symbol names are kept in ``candidates``, in the order
    they were tried.
    """

    def __init__(self, package: str, candidates):
        self.package = package
        self.candidates = tuple(candidates)
        names = ' nor '.join(f'"{name}"' for name in self.candidates)
        super().__init__(f"Neither {names} class exists on package {package}")


class PackageAlreadyLoadedWarning(UserWarning):
    """Issued when a load is requested for a package that is already loaded"""
    pass
