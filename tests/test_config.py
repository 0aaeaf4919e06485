# tests/test_config.py
"""Tests for configuration loading and saving."""
import sys

import pytest

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from wut.config import AppConfig, ConfigManager, CorrectorConfig


@pytest.fixture
def manager(tmp_path, monkeypatch):
    monkeypatch.delenv("WUT_DEBUG", raising=False)
    return ConfigManager(config_dir=tmp_path)


def test_defaults(manager):
    manager.load_config()
    config = manager.config
    assert config.corrector.history_max_distance == 5
    assert config.corrector.rule_timeout == 2.0
    assert config.corrector.max_workers == 4
    assert config.corrector.use_history is True
    assert config.history.max_entries == 5000
    assert config.history.shells == ["bash", "zsh", "fish"]
    assert config.debug is False


def test_load_from_file(manager):
    manager.config_file.write_text(
        "debug = true\n"
        "[corrector]\n"
        "rule_timeout = 5.0\n"
        "max_workers = 8\n"
        "[history]\n"
        "shells = [\"zsh\"]\n"
    )
    manager.load_config()

    assert manager.config.debug is True
    assert manager.config.corrector.rule_timeout == 5.0
    assert manager.config.corrector.max_workers == 8
    assert manager.config.history.shells == ["zsh"]


def test_malformed_file_falls_back_to_defaults(manager):
    manager.config_file.write_text("this is [not toml")
    manager.load_config()
    assert manager.config == AppConfig()


def test_invalid_values_fall_back_to_defaults(manager):
    manager.config_file.write_text("[corrector]\nmax_workers = 0\n")
    manager.load_config()
    assert manager.config.corrector == CorrectorConfig()


def test_save_round_trip(manager):
    manager.config.corrector.history_max_distance = 3
    path = manager.save_config()

    assert path == manager.config_file
    with open(path, "rb") as f:
        data = tomllib.load(f)
    assert data["corrector"]["history_max_distance"] == 3

    reloaded = ConfigManager(config_dir=path.parent)
    reloaded.load_config()
    assert reloaded.config.corrector.history_max_distance == 3


def test_debug_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("WUT_DEBUG", "1")
    assert ConfigManager(config_dir=tmp_path).config.debug is True


def test_config_dir_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("WUT_CONFIG_DIR", str(tmp_path))
    assert ConfigManager().config_file == tmp_path / "config.toml"
