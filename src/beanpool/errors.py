"""Error classes for the beanpool container.

This module provides:
- BeanpoolError: Base exception class for all container errors
- ConfigurationError: Invalid or missing container configuration
- DiscoveryError: Scan root cannot be resolved to a browsable package
- LoadError: A single discovery candidate could not be loaded
- ConstructionError: A bean could not be instantiated
- NotFoundError: Lookup of an unregistered bean name
- DuplicateNameError: Two components resolve to the same bean name
"""


class BeanpoolError(Exception):
    """Base exception for all beanpool errors."""

    pass


class ConfigurationError(BeanpoolError):
    """Raised when the container configuration is invalid or missing."""

    pass


class DiscoveryError(BeanpoolError):
    """Raised when the scan root does not resolve to a browsable package."""

    def __init__(self, package: str, reason: str) -> None:
        super().__init__(f"Cannot scan package '{package}': {reason}")
        self.package = package
        self.reason = reason


class LoadError(BeanpoolError):
    """A discovery candidate that could not be loaded or accepted.

    Load errors are collected during scanning rather than raised, so one
    broken module does not abort discovery of the rest.
    """

    def __init__(self, target: str, reason: str) -> None:
        super().__init__(f"Failed to load '{target}': {reason}")
        self.target = target
        self.reason = reason


class ConstructionError(BeanpoolError):
    """Raised when a bean cannot be instantiated with zero arguments."""

    def __init__(self, name: str, bean_type: type, reason: str) -> None:
        super().__init__(
            f"Failed to construct bean '{name}' ({bean_type.__qualname__}): {reason}"
        )
        self.name = name
        self.bean_type = bean_type
        self.reason = reason


class NotFoundError(BeanpoolError, KeyError):
    """Raised when a bean name is not registered in the container."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No bean named '{name}' is registered")
        self.name = name

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class DuplicateNameError(BeanpoolError):
    """Raised when two discovered components share the same bean name."""

    def __init__(self, name: str, existing: type, duplicate: type) -> None:
        super().__init__(
            f"Duplicate bean name '{name}': {existing.__qualname__} "
            f"conflicts with {duplicate.__qualname__}"
        )
        self.name = name
        self.existing = existing
        self.duplicate = duplicate
