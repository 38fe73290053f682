"""Shared fixtures for beanpool tests."""

import importlib
import sys
import textwrap
import uuid
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

type PackageFactory = Callable[..., str]


def _write_modules(directory: Path, modules: dict[str, str]) -> None:
    for module_name, source in modules.items():
        (directory / f"{module_name}.py").write_text(textwrap.dedent(source))


@pytest.fixture
def created_packages() -> Iterator[list[str]]:
    """Track throwaway package names and drop their modules after the test."""
    created: list[str] = []

    yield created

    for name in created:
        for module_name in list(sys.modules):
            if module_name == name or module_name.startswith(f"{name}."):
                del sys.modules[module_name]


@pytest.fixture
def make_package(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, created_packages: list[str]
) -> PackageFactory:
    """Write a throwaway package onto sys.path and return its dotted name.

    Each call creates a package with a unique name so module caching never
    leaks between tests. ``modules`` maps module names to source code,
    ``subpackages`` maps subpackage names to their modules, and ``files``
    maps raw file names to content. ``init`` is the package's __init__ source.
    """
    monkeypatch.syspath_prepend(str(tmp_path))

    def make(
        modules: dict[str, str] | None = None,
        subpackages: dict[str, dict[str, str]] | None = None,
        files: dict[str, str] | None = None,
        init: str = "",
    ) -> str:
        name = f"beans_{uuid.uuid4().hex}"
        package_dir = tmp_path / name
        package_dir.mkdir()
        (package_dir / "__init__.py").write_text(textwrap.dedent(init))
        _write_modules(package_dir, modules or {})

        for sub_name, sub_modules in (subpackages or {}).items():
            sub_dir = package_dir / sub_name
            sub_dir.mkdir()
            (sub_dir / "__init__.py").write_text("")
            _write_modules(sub_dir, sub_modules)

        for file_name, content in (files or {}).items():
            (package_dir / file_name).write_text(content)

        importlib.invalidate_caches()
        created_packages.append(name)
        return name

    return make


@pytest.fixture
def make_namespace_package(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, created_packages: list[str]
) -> PackageFactory:
    """Write a namespace package split across several sys.path entries.

    Each positional argument is the modules of one portion; portions have no
    __init__.py and live under separate roots on sys.path.
    """

    def make(*portions: dict[str, str]) -> str:
        name = f"ns_beans_{uuid.uuid4().hex}"
        for index, modules in enumerate(portions):
            root = tmp_path / f"portion_{index}"
            package_dir = root / name
            package_dir.mkdir(parents=True)
            _write_modules(package_dir, modules)
            monkeypatch.syspath_prepend(str(root))

        importlib.invalidate_caches()
        created_packages.append(name)
        return name

    return make


ALPHA_SOURCE = """
    from beanpool import component


    @component
    class Alpha:
        pass
"""

BETA_SOURCE = """
    from beanpool import component, scope


    @component("customBeta")
    @scope("prototype")
    class Beta:
        pass
"""

GAMMA_SOURCE = """
    class Gamma:
        pass
"""


@pytest.fixture
def scenario_sources() -> dict[str, str]:
    """Modules for a default singleton, a named prototype and an unmarked class."""
    return {"alpha": ALPHA_SOURCE, "beta": BETA_SOURCE, "gamma": GAMMA_SOURCE}


@pytest.fixture
def scenario_package(
    make_package: PackageFactory, scenario_sources: dict[str, str]
) -> str:
    """Package holding the scenario modules."""
    return make_package(scenario_sources)
