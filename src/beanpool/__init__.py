"""beanpool - minimal name-based dependency injection container.

This package scans a package for classes marked with ``@component``, records
their bean name and scope, eagerly creates singletons and creates prototypes
on demand behind ``ApplicationContext.get_bean``.
"""

__version__ = "0.1.0"

from beanpool.configuration import ScanConfiguration
from beanpool.context import ApplicationContext
from beanpool.descriptor import PROTOTYPE, SINGLETON, BeanDescriptor, default_bean_name
from beanpool.errors import (
    BeanpoolError,
    ConfigurationError,
    ConstructionError,
    DiscoveryError,
    DuplicateNameError,
    LoadError,
    NotFoundError,
)
from beanpool.factory import TypeFactory, construct
from beanpool.markers import (
    ComponentMarker,
    component,
    component_scan,
    get_component_marker,
    get_scan_configuration,
    get_scope_marker,
    scope,
)
from beanpool.pool import InstancePool
from beanpool.registry import BeanRegistry, build_registry
from beanpool.scanner import ComponentScanner, ScanResult

__all__ = [
    # Version
    "__version__",
    # Container
    "ApplicationContext",
    "BeanRegistry",
    "ComponentScanner",
    "InstancePool",
    "ScanResult",
    "build_registry",
    # Descriptors & construction
    "BeanDescriptor",
    "PROTOTYPE",
    "SINGLETON",
    "TypeFactory",
    "construct",
    "default_bean_name",
    # Markers
    "ComponentMarker",
    "component",
    "component_scan",
    "get_component_marker",
    "get_scan_configuration",
    "get_scope_marker",
    "scope",
    # Configuration
    "ScanConfiguration",
    # Errors
    "BeanpoolError",
    "ConfigurationError",
    "ConstructionError",
    "DiscoveryError",
    "DuplicateNameError",
    "LoadError",
    "NotFoundError",
]
