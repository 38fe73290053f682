"""Zero-argument construction of bean instances."""

import inspect
import logging

from beanpool.descriptor import BeanDescriptor
from beanpool.errors import ConstructionError

logger = logging.getLogger(__name__)


class TypeFactory[T]:
    """Factory that creates instances of a class through its no-argument constructor.

    The factory holds the type; neither create() nor can_create() takes
    arguments.
    """

    def __init__(self, bean_type: type[T], name: str | None = None) -> None:
        self._bean_type = bean_type
        self._name = name or bean_type.__name__

    @property
    def bean_type(self) -> type[T]:
        return self._bean_type

    def can_create(self) -> bool:
        """Check whether the type can be instantiated with zero arguments."""
        return self.unconstructible_reason() is None

    def unconstructible_reason(self) -> str | None:
        """Explain why the type cannot be instantiated, or None if it can."""
        if inspect.isabstract(self._bean_type):
            return "class is abstract"
        try:
            signature = inspect.signature(self._bean_type)
        except (TypeError, ValueError):
            # No introspectable signature (e.g. some builtins); let create() decide
            return None
        try:
            signature.bind()
        except TypeError as e:
            return f"constructor requires arguments ({e})"
        return None

    def create(self) -> T:
        """Create a new instance.

        Raises:
            ConstructionError: If the type cannot be instantiated or its
                constructor raises

        """
        reason = self.unconstructible_reason()
        if reason is not None:
            raise ConstructionError(self._name, self._bean_type, reason)

        try:
            instance = self._bean_type()
        except Exception as e:
            raise ConstructionError(
                self._name, self._bean_type, f"{type(e).__name__}: {e}"
            ) from e

        logger.debug("Constructed bean '%s' (%s)", self._name, self._bean_type.__name__)
        return instance


def construct[T](descriptor: BeanDescriptor[T]) -> T:
    """Create a new instance for a descriptor.

    Args:
        descriptor: Descriptor of the bean to instantiate

    Returns:
        Freshly constructed instance, never None

    Raises:
        ConstructionError: If instantiation fails

    """
    return TypeFactory(descriptor.bean_type, descriptor.name).create()
