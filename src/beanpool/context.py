"""Application context: the container callers look beans up in."""

from __future__ import annotations

import logging
from typing import Any

from beanpool.configuration import ScanConfiguration
from beanpool.descriptor import BeanDescriptor
from beanpool.errors import (
    ConfigurationError,
    ConstructionError,
    LoadError,
    NotFoundError,
)
from beanpool.factory import construct
from beanpool.markers import get_scan_configuration
from beanpool.pool import InstancePool
from beanpool.registry import BeanRegistry, build_registry
from beanpool.scanner import ComponentScanner

logger = logging.getLogger(__name__)


class ApplicationContext:
    """Container for components discovered in a package.

    Construction scans the configured package, builds the bean registry and
    instantiates every singleton before returning. After that the context is
    read-only: ``get_bean`` returns pooled singletons or creates a fresh
    prototype instance per call.

    Example:
        >>> @component_scan("myapp.components")
        ... class AppConfig:
        ...     pass
        >>> context = ApplicationContext(AppConfig)
        >>> service = context.get_bean("userService")

    """

    def __init__(self, configuration: type | ScanConfiguration) -> None:
        """Initialise context and eagerly create singletons.

        Args:
            configuration: Class marked with ``@component_scan`` or an explicit
                ScanConfiguration

        Raises:
            ConfigurationError: If the class carries no scan configuration
            DiscoveryError: If the base package cannot be scanned
            DuplicateNameError: If two components share a name and overrides
                are not allowed
            ConstructionError: If a singleton fails and fail_fast is set

        """
        self._configuration = _resolve_configuration(configuration)
        base_package = self._configuration.base_package
        logger.debug("Starting application context for '%s'", base_package)

        scanner = ComponentScanner(self._configuration.module_suffix)
        self._registry = build_registry(
            scanner.scan(base_package),
            allow_overrides=self._configuration.allow_overrides,
        )
        self._singletons = InstancePool.populate(
            self._registry, fail_fast=self._configuration.fail_fast
        )

        logger.info(
            "Application context for '%s' started with %d bean(s)",
            base_package,
            len(self._registry),
        )

    @property
    def configuration(self) -> ScanConfiguration:
        return self._configuration

    @property
    def registry(self) -> BeanRegistry:
        return self._registry

    @property
    def singletons(self) -> InstancePool:
        """Pool of eagerly created singleton instances."""
        return self._singletons

    @property
    def load_failures(self) -> tuple[LoadError, ...]:
        """Component candidates skipped during discovery."""
        return self._registry.load_failures

    def get_bean(self, name: str) -> Any:
        """Get a bean instance by name.

        Args:
            name: Registered bean name

        Returns:
            The shared instance for singletons, a new instance otherwise

        Raises:
            NotFoundError: If no bean is registered under the name
            ConstructionError: If the bean cannot be instantiated

        """
        descriptor = self.get_descriptor(name)
        if descriptor.is_singleton:
            failure = self._singletons.failures.get(name)
            if failure is not None:
                raise ConstructionError(
                    failure.name, failure.bean_type, failure.reason
                ) from (failure.__cause__ or failure)
            return self._singletons[name]
        return construct(descriptor)

    def get_descriptor(self, name: str) -> BeanDescriptor[object]:
        """Get the descriptor registered under a name.

        Raises:
            NotFoundError: If no bean is registered under the name

        """
        try:
            return self._registry[name]
        except KeyError:
            raise NotFoundError(name) from None

    def get_type(self, name: str) -> type:
        return self.get_descriptor(name).bean_type

    def contains_bean(self, name: str) -> bool:
        return name in self._registry

    def is_singleton(self, name: str) -> bool:
        return self.get_descriptor(name).is_singleton

    def is_prototype(self, name: str) -> bool:
        return not self.get_descriptor(name).is_singleton

    def bean_names(self) -> list[str]:
        """List all registered bean names."""
        return list(self._registry)

    def __contains__(self, name: object) -> bool:
        return name in self._registry


def _resolve_configuration(
    configuration: type | ScanConfiguration,
) -> ScanConfiguration:
    if isinstance(configuration, ScanConfiguration):
        return configuration
    if not isinstance(configuration, type):
        raise ConfigurationError(
            "Expected a configuration class or ScanConfiguration, "
            f"got {configuration!r}"
        )

    scan_configuration = get_scan_configuration(configuration)
    if scan_configuration is None:
        raise ConfigurationError(
            f"{configuration.__qualname__} is not marked with @component_scan"
        )
    return scan_configuration
