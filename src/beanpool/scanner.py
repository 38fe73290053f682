"""Component discovery over a package directory.

The scanner lists the modules directly inside a package, imports each one and
collects the classes marked with ``@component``. Discovery is best effort:
a module that fails to import, or a component that cannot be constructed
without arguments, is reported as a LoadError and the scan carries on.
"""

from __future__ import annotations

import importlib
import importlib.util
import inspect
import logging
from pathlib import Path
from types import ModuleType

from beanpool.descriptor import SINGLETON, BeanDescriptor, default_bean_name
from beanpool.errors import DiscoveryError, LoadError
from beanpool.factory import TypeFactory
from beanpool.markers import ComponentMarker, get_component_marker, get_scope_marker

logger = logging.getLogger(__name__)

type ScanResult = BeanDescriptor[object] | LoadError

_SKIPPED_MODULES = frozenset({"__init__", "__main__"})


class ComponentScanner:
    """Discovers components in the modules directly under a package.

    Example:
        >>> scanner = ComponentScanner()
        >>> results = scanner.scan("myapp.components")
        >>> [r.name for r in results if isinstance(r, BeanDescriptor)]
        ['alpha', 'customBeta']

    """

    def __init__(self, module_suffix: str = ".py") -> None:
        """Initialise scanner.

        Args:
            module_suffix: File suffix identifying loadable modules.

        """
        self._module_suffix = module_suffix

    def scan(self, base_package: str) -> list[ScanResult]:
        """Scan a package for components.

        Only modules directly inside the package are inspected; subpackages
        are not descended into.

        Args:
            base_package: Dotted name of the package to scan

        Returns:
            One entry per discovered component or per failed candidate, in
            directory listing order

        Raises:
            DiscoveryError: If the package cannot be resolved to a directory

        """
        results: list[ScanResult] = []
        for module_name in self._candidate_modules(base_package):
            results.extend(self._scan_module(module_name))

        logger.debug("Scanned '%s': %d scan results", base_package, len(results))
        return results

    def _resolve_directories(self, base_package: str) -> list[Path]:
        try:
            spec = importlib.util.find_spec(base_package)
            if spec is not None:
                # find_spec does not execute the package's own __init__
                importlib.import_module(base_package)
        except Exception as e:
            raise DiscoveryError(base_package, f"{type(e).__name__}: {e}") from e

        if spec is None:
            raise DiscoveryError(base_package, "package not found")
        if spec.submodule_search_locations is None:
            raise DiscoveryError(base_package, "not a package")

        directories = [
            Path(location)
            for location in spec.submodule_search_locations
            if Path(location).is_dir()
        ]
        if not directories:
            raise DiscoveryError(base_package, "no browsable directory found")
        return directories

    def _candidate_modules(self, base_package: str) -> list[str]:
        """List module names directly under the package, once each.

        A namespace package may span several directories; a module file
        present in more than one of them resolves to a single module.
        """
        modules: dict[str, None] = {}
        for directory in self._resolve_directories(base_package):
            for entry in sorted(directory.iterdir()):
                if not entry.is_file() or entry.suffix != self._module_suffix:
                    continue
                if entry.stem in _SKIPPED_MODULES:
                    continue
                modules.setdefault(f"{base_package}.{entry.stem}", None)
        return list(modules)

    def _scan_module(self, module_name: str) -> list[ScanResult]:
        try:
            module = importlib.import_module(module_name)
        except Exception as e:
            logger.warning("Failed to load module '%s': %s", module_name, e)
            return [LoadError(module_name, f"{type(e).__name__}: {e}")]

        return [
            self._describe(cls, marker)
            for cls, marker in _components_defined_in(module)
        ]

    def _describe(self, cls: type, marker: ComponentMarker) -> ScanResult:
        name = marker.name or default_bean_name(cls.__name__)
        scope = get_scope_marker(cls) or SINGLETON

        reason = TypeFactory(cls, name).unconstructible_reason()
        if reason is not None:
            target = f"{cls.__module__}.{cls.__qualname__}"
            logger.warning("Skipping component '%s': %s", target, reason)
            return LoadError(target, reason)

        logger.debug(
            "Discovered component '%s' (%s) with scope %s", name, cls.__name__, scope
        )
        return BeanDescriptor(cls, name, scope)


def _components_defined_in(module: ModuleType) -> list[tuple[type, ComponentMarker]]:
    """List marked classes defined in a module, ignoring imported ones."""
    components = []
    for _, member in inspect.getmembers(module, inspect.isclass):
        if member.__module__ != module.__name__:
            continue
        marker = get_component_marker(member)
        if marker is None:
            logger.debug("Ignoring unmarked class %s", member.__qualname__)
            continue
        components.append((member, marker))
    return components
