"""
Package Loader

Resolves dotted package names (e.g. 'com.example.Widget') to unit files
under an ordered classpath, loads them once, and instantiates the class
each unit defines.

Usage:
    from pkgloader import package_loader

    package_loader.set_class_path('/srv/packages')
    widget = package_loader.load('com.example.Widget')

    # Superpackages load a whole subtree
    widgets = package_loader.load('com.example.*')
"""

from .classpath import ClassPath
from .exceptions import (
    PackageError, PackageNotFoundError, SymbolNotFoundError,
    PackageLoadError, InvalidPackageNameError, PackageAlreadyLoadedWarning
)
from .loader import PackageLoader, PackageSlot, package_loader
from .registry import LoadedPackageRegistry

__version__ = "1.0.0"

__all__ = [
    'ClassPath',
    'LoadedPackageRegistry',
    'PackageLoader',
    'PackageSlot',
    'package_loader',
    'PackageError',
    'PackageNotFoundError',
    'SymbolNotFoundError',
    'PackageLoadError',
    'InvalidPackageNameError',
    'PackageAlreadyLoadedWarning',
]
