"""
Superpackage Expansion

Loads every package found beneath a wildcard package such as
'tld.domain.*' and collects the instances into one mapping.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Set

from . import signals
from .resolver import strip_wildcard, package_directory

logger = logging.getLogger(__name__)


class SuperpackageExpander:
    """
    Expands a superpackage against a loader's classpath.

    The result maps the base package to its own instance and every
    subpackage to its instance under two keys: the fully qualified name
    ('tld.domain.sub') and the short name ('sub'). Keys are lowercase.

    Expansion is not transactional. If one subpackage fails, the error
    propagates and packages loaded before it stay registered.
    """

    def __init__(self, loader):
        self.loader = loader

    def load_all(self, package: str) -> Dict[str, Any]:
        base = strip_wildcard(package)
        base_key = base.lower()
        base_dir = package_directory(base)

        result: Dict[str, Any] = {}
        handled: Set[str] = set()
        loaded = 0

        for root in self.loader.classpath:
            real_path = Path(root) / base_dir

            # FIXME: a root without the base directory is skipped outright;
            # packages it could still provide through another layout are
            # never looked for.
            if not real_path.is_dir():
                logger.debug(f"Skipping {root}: no {base_dir} directory")
                continue

            for unit_file in self.loader.indexer.scan(real_path):
                name = self.loader.resolver.package_for_unit(root, unit_file)
                key = name.lower()
                if not name or key in handled:
                    continue
                handled.add(key)

                if self.loader.is_loaded(name):
                    self.loader.reject(name)
                    continue

                instance = self.loader.load_single(name)
                self._store(result, base_key, key, instance)
                loaded += 1

        signals.superpackage_loaded.send(
            sender=self.loader.__class__,
            package=package,
            packages=result,
        )
        logger.info(f"Loaded superpackage {package} ({loaded} packages)")
        return result

    @staticmethod
    def _store(result: Dict[str, Any], base_key: str, key: str, instance: Any) -> None:
        if key == base_key:
            result[base_key] = instance
        elif not base_key:
            result[key] = instance
        else:
            short_key = key[len(base_key) + 1:]
            result[short_key] = instance
            result[f"{base_key}.{short_key}"] = instance
