"""Tests for the manage_plugins CLI."""

import json

import pytest

import manage_plugins
from plugin_deps import constants


@pytest.fixture
def conflict_file(tmp_path):
    path = tmp_path / "deps.json"
    path.write_text(
        json.dumps(
            {
                "sets": {
                    "user": [
                        {"plugin": "RootA:1.0", "dependencies": ["Dep:1.0"]},
                        {"plugin": "RootB:1.0", "dependencies": ["Dep:2.0"]},
                    ]
                }
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def clean_file(tmp_path):
    path = tmp_path / "deps.yaml"
    path.write_text(
        "sets:\n  user:\n    - plugin: 'timestamper:1.11.3'\n      dependencies: ['workflow-step-api:2.22']\n",
        encoding="utf-8",
    )
    return path


class TestParseCommand:
    """Tests for the parse command."""

    def test_valid(self, capsys):
        assert manage_plugins.main(["parse", "workflow-job:2.39"]) == 0

        out = capsys.readouterr().out
        assert "workflow-job" in out
        assert "2.39" in out

    def test_invalid(self, capsys):
        assert manage_plugins.main(["parse", "workflow-job:2.39", "broken"]) == 1

        assert "invalid plugin format 'broken'" in capsys.readouterr().out


class TestVerifyCommand:
    """Tests for the verify command."""

    def test_conflicts_fail(self, conflict_file, capsys):
        assert manage_plugins.main(["verify", str(conflict_file), "--no-base"]) == 1

        out = capsys.readouterr().out
        assert "Found 2 conflict(s)" in out
        assert (
            "Plugin 'RootA:1.0' requires version '1.0' but plugin 'RootB:1.0' requires '2.0' for plugin 'Dep'"
            in out
        )

    def test_warn_only(self, conflict_file, capsys):
        assert manage_plugins.main(["verify", str(conflict_file), "--no-base", "--warn-only"]) == 0

        assert "Found 2 conflict(s)" in capsys.readouterr().out

    def test_clean_with_base(self, clean_file, capsys):
        assert manage_plugins.main(["verify", str(clean_file)]) == 0

        assert "No version conflicts in 2 set(s)." in capsys.readouterr().out

    def test_conflict_with_base(self, tmp_path, capsys):
        path = tmp_path / "deps.yaml"
        path.write_text("sets:\n  user:\n    - plugin: 'git:4.3.0'\n", encoding="utf-8")

        assert manage_plugins.main(["verify", str(path)]) == 1

        assert "'git:4.2.2'" in capsys.readouterr().out

    def test_base_flag_overrides_env_default(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(constants, "INCLUDE_BASE_PLUGINS", False)
        path = tmp_path / "deps.yaml"
        path.write_text("sets:\n  user:\n    - plugin: 'git:4.3.0'\n", encoding="utf-8")

        assert manage_plugins.main(["verify", str(path)]) == 0
        assert manage_plugins.main(["verify", str(path), "--base"]) == 1

        assert "'git:4.2.2'" in capsys.readouterr().out

    def test_not_utf8_file(self, tmp_path, capsys):
        path = tmp_path / "deps.json"
        path.write_bytes(b'{"sets": "\xff"}')

        assert manage_plugins.main(["verify", str(path)]) == 2

        assert "Invalid JSON" in capsys.readouterr().out

    def test_default_file(self, clean_file, monkeypatch, capsys):
        monkeypatch.setattr(constants, "DEPENDENCY_FILE", clean_file)

        assert manage_plugins.main(["verify", "--no-base"]) == 0

        assert "No version conflicts in 1 set(s)." in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert manage_plugins.main(["verify", str(tmp_path / "missing.yaml")]) == 2

        assert "Dependency file not found" in capsys.readouterr().out


class TestOtherCommands:
    """Tests for base listing and usage output."""

    def test_base(self, capsys):
        assert manage_plugins.main(["base"]) == 0

        assert "Base plugins" in capsys.readouterr().out

    def test_no_command(self, capsys):
        assert manage_plugins.main([]) == 1

        assert "usage:" in capsys.readouterr().out
