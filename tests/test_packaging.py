"""Tests for package discovery in the build configuration."""

from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"


def _module_dirs() -> set[str]:
    return {
        ".".join(path.parent.relative_to(SRC).parts)
        for path in SRC.rglob("*.py")
        if "__pycache__" not in path.parts
    }


class TestPackageDiscovery:
    def test_namespace_discovery_enabled(self):
        tomllib = pytest.importorskip("tomllib")
        config = tomllib.loads((ROOT / "pyproject.toml").read_text())

        find = config["tool"]["setuptools"]["packages"]["find"]
        assert find["where"] == ["src"]
        assert find["namespaces"] is True

    def test_every_module_directory_is_packaged(self):
        setuptools = pytest.importorskip("setuptools")
        found = set(setuptools.find_namespace_packages(where=str(SRC)))

        expected = _module_dirs()
        assert {"nutriplan.services", "nutriplan.utils", "nutriplan.generators", "nutriplan.web.routers"} <= expected
        assert expected <= found
