"""Eagerly populated pool of singleton bean instances."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from beanpool.errors import ConstructionError
from beanpool.factory import construct
from beanpool.registry import BeanRegistry

logger = logging.getLogger(__name__)


class InstancePool(Mapping[str, Any]):
    """Read-only mapping of bean name to shared singleton instance.

    Only singleton-scoped beans that constructed successfully are members.
    Singletons whose construction failed are kept apart in ``failures`` so
    the context can report them instead of yielding nothing.
    """

    def __init__(
        self,
        instances: Mapping[str, Any],
        failures: Mapping[str, ConstructionError] | None = None,
    ) -> None:
        self._instances = MappingProxyType(dict(instances))
        self._failures = MappingProxyType(dict(failures or {}))

    @classmethod
    def populate(
        cls, registry: BeanRegistry, *, fail_fast: bool = False
    ) -> InstancePool:
        """Construct every singleton in the registry.

        Args:
            registry: Registry whose singleton descriptors are instantiated
            fail_fast: Re-raise the first construction failure instead of
                recording it

        Returns:
            Fully populated pool

        Raises:
            ConstructionError: If a singleton fails and fail_fast is set

        """
        instances: dict[str, Any] = {}
        failures: dict[str, ConstructionError] = {}

        for name, descriptor in registry.items():
            if not descriptor.is_singleton:
                continue
            try:
                instances[name] = construct(descriptor)
            except ConstructionError as e:
                if fail_fast:
                    raise
                logger.error("Singleton bean '%s' unavailable: %s", name, e)
                failures[name] = e

        logger.debug(
            "Instance pool populated with %d singleton(s), %d failed",
            len(instances),
            len(failures),
        )
        return cls(instances, failures)

    def __getitem__(self, name: str) -> Any:
        return self._instances[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._instances)

    def __len__(self) -> int:
        return len(self._instances)

    @property
    def failures(self) -> Mapping[str, ConstructionError]:
        """Singletons that could not be constructed at start-up."""
        return self._failures
