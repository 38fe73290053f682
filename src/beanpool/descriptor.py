"""Bean metadata produced by component discovery."""

from dataclasses import dataclass

SINGLETON = "singleton"
PROTOTYPE = "prototype"


@dataclass(frozen=True)
class BeanDescriptor[T]:
    """Descriptor for a discovered component.

    Attributes:
        bean_type: The component class, constructible with no arguments
        name: Logical bean name, unique within a registry
        scope: Bean scope ("singleton" or "prototype"); any tag other than
            "singleton" is treated as prototype

    """

    bean_type: type[T]
    name: str
    scope: str = SINGLETON

    @property
    def is_singleton(self) -> bool:
        """Check whether a single shared instance is kept for this bean."""
        return self.scope == SINGLETON


def default_bean_name(type_name: str) -> str:
    """Derive a bean name from a simple class name.

    Lower-cases the first character only, so ``UserService`` becomes
    ``userService`` and ``URLParser`` becomes ``uRLParser``.
    """
    return type_name[:1].lower() + type_name[1:]
