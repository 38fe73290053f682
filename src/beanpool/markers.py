"""Declarative markers for components and configuration classes.

Markers attach metadata to a class without changing its behaviour. They are
read back from the class's own namespace, so subclasses of a marked class are
not marked themselves.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, overload

from beanpool.configuration import ScanConfiguration

__all__ = [
    "ComponentMarker",
    "component",
    "component_scan",
    "get_component_marker",
    "get_scan_configuration",
    "get_scope_marker",
    "scope",
]

_COMPONENT_ATTR = "__bean_component__"
_SCOPE_ATTR = "__bean_scope__"
_SCAN_ATTR = "__component_scan__"


@dataclass(frozen=True)
class ComponentMarker:
    """Metadata attached by ``@component``.

    Attributes:
        name: Explicit bean name; empty means derive it from the class name

    """

    name: str = ""


@overload
def component[C: type](target: C, /) -> C: ...


@overload
def component[C: type](
    target: str | None = None, /, *, name: str = ""
) -> Callable[[C], C]: ...


def component(target: Any = None, /, *, name: str = "") -> Any:
    """Mark a class as a managed component.

    Example:
        @component
        class UserService: ...            # bean name "userService"

        @component("repo")
        class UserRepository: ...         # bean name "repo"

    """
    if isinstance(target, type):
        return _mark_component(target, name)

    if target is not None:
        if not isinstance(target, str):
            raise TypeError(f"Component name must be a string, got {target!r}")
        name = target

    def decorator[C: type](cls: C) -> C:
        return _mark_component(cls, name)

    return decorator


def _mark_component[C: type](cls: C, name: str) -> C:
    if not isinstance(name, str):
        raise TypeError(f"Component name must be a string, got {name!r}")
    setattr(cls, _COMPONENT_ATTR, ComponentMarker(name.strip()))
    return cls


def scope[C: type](value: str) -> Callable[[C], C]:
    """Set the scope of a component ("singleton" or "prototype").

    Raises:
        TypeError: If the value is not a string
        ValueError: If the value is empty

    """
    if not isinstance(value, str):
        raise TypeError(f"Scope must be a string, got {value!r}")
    if not value.strip():
        raise ValueError("Scope cannot be empty")

    def decorator(cls: C) -> C:
        setattr(cls, _SCOPE_ATTR, value.strip())
        return cls

    return decorator


def component_scan[C: type](base_package: str, **options: Any) -> Callable[[C], C]:
    """Mark a configuration class with the package to scan for components.

    Keyword options are passed through to ``ScanConfiguration``; the
    configuration is validated when the decorator is applied.
    """
    configuration = ScanConfiguration(base_package=base_package, **options)

    def decorator(cls: C) -> C:
        setattr(cls, _SCAN_ATTR, configuration)
        return cls

    return decorator


def get_component_marker(cls: type) -> ComponentMarker | None:
    """Get the component marker declared directly on a class."""
    marker = vars(cls).get(_COMPONENT_ATTR)
    return marker if isinstance(marker, ComponentMarker) else None


def get_scope_marker(cls: type) -> str | None:
    """Get the scope declared directly on a class."""
    return vars(cls).get(_SCOPE_ATTR)


def get_scan_configuration(cls: type) -> ScanConfiguration | None:
    """Get the scan configuration declared directly on a class."""
    configuration = vars(cls).get(_SCAN_ATTR)
    return configuration if isinstance(configuration, ScanConfiguration) else None
