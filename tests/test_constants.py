"""Tests for environment-driven constants."""

import importlib

import pytest

from plugin_deps import constants


@pytest.fixture
def reload_constants(monkeypatch):
    def _reload(**env):
        for key in ("PLUGIN_DEPENDENCY_FILE", "PLUGIN_INCLUDE_BASE", "LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(constants)

    yield _reload

    monkeypatch.undo()
    importlib.reload(constants)


class TestConstants:
    """Tests for plugin_deps.constants."""

    def test_defaults(self, reload_constants):
        module = reload_constants()

        assert module.DEPENDENCY_FILE == module.PROJECT_ROOT / "plugins" / "dependencies.yaml"
        assert module.LOG_LEVEL == "WARNING"
        assert module.INCLUDE_BASE_PLUGINS is True

    def test_relative_dependency_file(self, reload_constants):
        module = reload_constants(PLUGIN_DEPENDENCY_FILE="conf/deps.json")

        assert module.DEPENDENCY_FILE == (module.PROJECT_ROOT / "conf" / "deps.json").resolve()

    def test_absolute_dependency_file(self, reload_constants, tmp_path):
        module = reload_constants(PLUGIN_DEPENDENCY_FILE=str(tmp_path / "deps.yaml"))

        assert module.DEPENDENCY_FILE == tmp_path / "deps.yaml"

    @pytest.mark.parametrize("value,expected", [("0", False), ("off", False), ("YES", True), ("1", True)])
    def test_include_base(self, reload_constants, value, expected):
        module = reload_constants(PLUGIN_INCLUDE_BASE=value)

        assert module.INCLUDE_BASE_PLUGINS is expected
