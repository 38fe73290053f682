"""Configuration for the application context.

The scan configuration is normally attached to a configuration class with the
``@component_scan`` decorator, but can also be built directly or from a
properties dictionary with environment variable fallback.
"""

from __future__ import annotations

import os
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

_TRUTHY = ("true", "1", "yes")


class ScanConfiguration(BaseModel):
    """Component scan configuration.

    Attributes:
        base_package: Dotted name of the package whose modules are scanned
        module_suffix: File suffix identifying loadable modules
        allow_overrides: Let a later component replace an earlier one with the
            same bean name instead of failing
        fail_fast: Abort context start-up when a singleton cannot be constructed

    Example:
        ```python
        config = ScanConfiguration(base_package="myapp.components")

        # From properties dict with env fallback
        config = ScanConfiguration.from_properties({"fail_fast": True})
        ```

    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_assignment=True,
    )

    base_package: str = Field(description="Dotted package name to scan")
    module_suffix: str = Field(
        default=".py", description="Suffix of module files to load"
    )
    allow_overrides: bool = Field(
        default=False,
        description="Last registered component wins on duplicate bean names",
    )
    fail_fast: bool = Field(
        default=False,
        description="Raise when a singleton fails to construct at start-up",
    )

    @field_validator("base_package")
    @classmethod
    def validate_base_package(cls, v: str) -> str:
        """Validate that the base package is a dotted identifier path.

        Raises:
            ValueError: If the name is empty or any segment is not an identifier

        """
        v = v.strip()
        if not v:
            raise ValueError("Base package cannot be empty")
        if not all(part.isidentifier() for part in v.split(".")):
            raise ValueError(f"Invalid package name: {v}")
        return v

    @field_validator("module_suffix")
    @classmethod
    def validate_module_suffix(cls, v: str) -> str:
        """Validate that the module suffix looks like a file extension."""
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"Module suffix must start with '.', got: {v!r}")
        return v

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from properties with environment fallback.

        Environment variables used:
        - BEANPOOL_BASE_PACKAGE: Package to scan
        - BEANPOOL_ALLOW_OVERRIDES: Allow duplicate names ("true"/"1"/"yes")
        - BEANPOOL_FAIL_FAST: Fail on singleton construction errors

        Args:
            properties: Configuration properties dictionary

        Returns:
            Validated configuration instance

        Raises:
            ValidationError: If configuration is invalid

        """
        config_data = properties.copy()

        if "base_package" not in config_data:
            config_data["base_package"] = os.getenv("BEANPOOL_BASE_PACKAGE", "")

        if "allow_overrides" not in config_data:
            env_value = os.getenv("BEANPOOL_ALLOW_OVERRIDES", "")
            config_data["allow_overrides"] = env_value.lower() in _TRUTHY

        if "fail_fast" not in config_data:
            env_value = os.getenv("BEANPOOL_FAIL_FAST", "")
            config_data["fail_fast"] = env_value.lower() in _TRUTHY

        return cls.model_validate(config_data)
