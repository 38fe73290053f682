"""Tests for component, scope and component_scan markers."""

import pytest
from pydantic import ValidationError

from beanpool import (
    ComponentMarker,
    ScanConfiguration,
    component,
    component_scan,
    get_component_marker,
    get_scan_configuration,
    get_scope_marker,
    scope,
)

# =============================================================================
# @component
# =============================================================================


class TestComponentMarker:
    """Test suite for the @component decorator."""

    def test_bare_decorator_marks_class_without_name(self) -> None:
        """Verify bare @component records an empty name to be derived later."""

        # Arrange
        @component
        class Service:
            pass

        # Act
        marker = get_component_marker(Service)

        # Assert
        assert marker == ComponentMarker("")

    def test_called_without_arguments_marks_class_without_name(self) -> None:
        """Verify @component() behaves like the bare decorator."""

        # Arrange
        @component()
        class Service:
            pass

        # Act
        marker = get_component_marker(Service)

        # Assert
        assert marker == ComponentMarker("")

    def test_positional_name_is_recorded(self) -> None:
        """Verify @component("name") records the explicit bean name."""

        # Arrange
        @component("custom")
        class Service:
            pass

        # Act
        marker = get_component_marker(Service)

        # Assert
        assert marker == ComponentMarker("custom")

    def test_keyword_name_is_recorded(self) -> None:
        """Verify @component(name=...) records the explicit bean name."""

        # Arrange
        @component(name="custom")
        class Service:
            pass

        # Act
        marker = get_component_marker(Service)

        # Assert
        assert marker == ComponentMarker("custom")

    def test_decorator_returns_the_same_class(self) -> None:
        """Verify marking a class does not replace or wrap it."""

        # Arrange
        class Service:
            pass

        # Act
        marked = component(Service)

        # Assert
        assert marked is Service

    def test_unmarked_class_has_no_marker(self) -> None:
        """Verify a plain class reports no component marker."""

        # Arrange
        class Plain:
            pass

        # Act & Assert
        assert get_component_marker(Plain) is None

    def test_marker_is_not_inherited_by_subclasses(self) -> None:
        """Verify a subclass of a component is not itself a component."""

        # Arrange
        @component
        class Base:
            pass

        class Child(Base):
            pass

        # Act & Assert
        assert get_component_marker(Child) is None

    def test_non_string_name_rejected(self) -> None:
        """Verify a non-string bean name is rejected when decorating."""
        # Act & Assert
        with pytest.raises(TypeError, match="must be a string"):
            component(42)  # type: ignore[call-overload]


# =============================================================================
# @scope
# =============================================================================


class TestScopeMarker:
    """Test suite for the @scope decorator."""

    def test_scope_is_recorded(self) -> None:
        """Verify @scope records the scope tag on the class."""

        # Arrange
        @scope("prototype")
        class Service:
            pass

        # Act & Assert
        assert get_scope_marker(Service) == "prototype"

    def test_missing_scope_returns_none(self) -> None:
        """Verify a class without @scope reports no scope tag."""

        # Arrange
        class Service:
            pass

        # Act & Assert
        assert get_scope_marker(Service) is None

    def test_scope_order_relative_to_component_does_not_matter(self) -> None:
        """Verify @scope works both above and below @component."""

        # Arrange
        @scope("prototype")
        @component
        class First:
            pass

        @component
        @scope("prototype")
        class Second:
            pass

        # Act & Assert
        assert get_scope_marker(First) == get_scope_marker(Second) == "prototype"
        assert get_component_marker(First) is not None
        assert get_component_marker(Second) is not None

    def test_empty_scope_rejected(self) -> None:
        """Verify a blank scope tag is rejected when decorating."""
        # Act & Assert
        with pytest.raises(ValueError, match="cannot be empty"):
            scope("  ")

    def test_non_string_scope_rejected(self) -> None:
        """Verify a non-string scope tag is rejected when decorating."""
        # Act & Assert
        with pytest.raises(TypeError, match="must be a string"):
            scope(None)  # type: ignore[arg-type]


# =============================================================================
# @component_scan
# =============================================================================


class TestComponentScanMarker:
    """Test suite for the @component_scan decorator."""

    def test_scan_configuration_is_recorded(self) -> None:
        """Verify @component_scan attaches a validated ScanConfiguration."""

        # Arrange
        @component_scan("myapp.components", fail_fast=True)
        class AppConfig:
            pass

        # Act
        configuration = get_scan_configuration(AppConfig)

        # Assert
        assert configuration == ScanConfiguration(
            base_package="myapp.components", fail_fast=True
        )

    def test_unmarked_class_has_no_scan_configuration(self) -> None:
        """Verify a plain class reports no scan configuration."""

        # Arrange
        class AppConfig:
            pass

        # Act & Assert
        assert get_scan_configuration(AppConfig) is None

    def test_invalid_package_rejected_when_decorating(self) -> None:
        """Verify an invalid package name fails as soon as the decorator is built."""
        # Act & Assert
        with pytest.raises(ValidationError):
            component_scan("not a package")

    def test_unknown_option_rejected(self) -> None:
        """Verify options not known to ScanConfiguration are rejected."""
        # Act & Assert
        with pytest.raises(ValidationError):
            component_scan("myapp", recursive=True)
