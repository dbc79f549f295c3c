"""
Settings manager unit tests
Tests for env > yaml > defaults precedence.
"""

import pytest

from focusboard.config.settings_manager import SettingsManager


@pytest.fixture
def make_manager(tmp_path, monkeypatch):
    """Build a fresh manager around a settings file in tmp_path"""
    path = tmp_path / "settings.yaml"
    monkeypatch.setenv("FOCUSBOARD_SETTINGS", str(path))
    for env_var in SettingsManager.ENV_VAR_MAPPING.values():
        monkeypatch.delenv(env_var, raising=False)

    def _make(content=None):
        if content is not None:
            path.write_text(content, encoding="utf-8")
        manager = object.__new__(SettingsManager)
        manager._initialize()
        return manager

    return _make


class TestSettingsManager:

    def test_defaults_without_file(self, make_manager, tmp_path):
        manager = make_manager()

        assert manager.host == "127.0.0.1"
        assert manager.port == 1111
        assert manager.timezone is None
        assert manager.history_days == 6
        # missing file is not created
        assert not (tmp_path / "settings.yaml").exists()

    def test_yaml_overrides_defaults(self, make_manager):
        manager = make_manager("port: 8080\ntimezone: Europe/Berlin\nhistory_days: 13\n")

        assert manager.port == 8080
        assert manager.timezone == "Europe/Berlin"
        assert manager.history_days == 13
        assert manager.host == "127.0.0.1"

    def test_env_overrides_yaml(self, make_manager, monkeypatch):
        monkeypatch.setenv("FOCUSBOARD_PORT", "9090")
        manager = make_manager("port: 8080\n")

        assert manager.port == 9090

    def test_snapshot_path_expands_user(self, make_manager, tmp_path):
        manager = make_manager("snapshot_path: ~/stats.json\n")

        assert "~" not in str(manager.snapshot_path)
        assert manager.snapshot_path.name == "stats.json"

    def test_empty_yaml(self, make_manager):
        manager = make_manager("")
        assert manager.cors_origins == SettingsManager.DEFAULTS["cors_origins"]
