"""Bean registry assembled from a single discovery pass."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from beanpool.descriptor import BeanDescriptor
from beanpool.errors import DuplicateNameError, LoadError
from beanpool.scanner import ScanResult

logger = logging.getLogger(__name__)


class BeanRegistry(Mapping[str, BeanDescriptor[object]]):
    """Read-only mapping of bean name to descriptor.

    The registry is built once by ``build_registry`` and has no API to add or
    remove entries. Load failures reported during discovery are kept alongside
    the descriptors so callers can inspect what was skipped.
    """

    def __init__(
        self,
        descriptors: Mapping[str, BeanDescriptor[object]],
        load_failures: Iterable[LoadError] = (),
    ) -> None:
        self._descriptors = MappingProxyType(dict(descriptors))
        self._load_failures = tuple(load_failures)

    def __getitem__(self, name: str) -> BeanDescriptor[object]:
        return self._descriptors[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        return f"BeanRegistry({sorted(self._descriptors)!r})"

    @property
    def load_failures(self) -> tuple[LoadError, ...]:
        """Candidates that were skipped during discovery."""
        return self._load_failures


def build_registry(
    results: Iterable[ScanResult], *, allow_overrides: bool = False
) -> BeanRegistry:
    """Assemble a registry from scanner output.

    Args:
        results: Descriptors and load failures produced by a scan
        allow_overrides: When True a later descriptor replaces an earlier one
            with the same name; otherwise duplicates are rejected

    Returns:
        Registry holding exactly one descriptor per bean name

    Raises:
        DuplicateNameError: If two descriptors share a name and overrides are
            not allowed

    """
    descriptors: dict[str, BeanDescriptor[object]] = {}
    failures: list[LoadError] = []

    for result in results:
        if isinstance(result, LoadError):
            failures.append(result)
            continue

        existing = descriptors.get(result.name)
        if existing is not None:
            if not allow_overrides:
                raise DuplicateNameError(
                    result.name, existing.bean_type, result.bean_type
                )
            logger.warning(
                "Overriding bean '%s': %s replaces %s",
                result.name,
                result.bean_type.__qualname__,
                existing.bean_type.__qualname__,
            )

        descriptors[result.name] = result
        logger.debug("Registered bean '%s' with scope %s", result.name, result.scope)

    if failures:
        logger.warning(
            "%d component candidate(s) could not be loaded: %s",
            len(failures),
            ", ".join(f.target for f in failures),
        )

    return BeanRegistry(descriptors, failures)
