# tests/test_cli.py
"""Tests for the command-line interface."""
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from wut import __version__
from wut.cli.main import app
from wut.config import CorrectorConfig, config_manager
from wut.corrector.corrector import Corrector

runner = CliRunner()

UPSTREAM_OUTPUT = "To push the current branch, use\n\n    git push --set-upstream origin feature-x\n"


@pytest.fixture(autouse=True)
def quiet_logging():
    with patch("wut.cli.main.setup_logging") as mock_setup:
        yield mock_setup


@pytest.fixture
def cli_corrector(clean_registry, store, rule_engine):
    corrector = Corrector(store=store, rule_engine=rule_engine, config=CorrectorConfig())
    clean_registry.register("corrector", corrector)
    return corrector


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_fix_typo(cli_corrector):
    result = runner.invoke(app, ["fix", "gti", "status"])
    assert result.exit_code == 0
    assert "git status" in result.output


def test_fix_dangerous(cli_corrector):
    result = runner.invoke(app, ["fix", "--", "rm", "-rf", "/"])
    assert result.exit_code == 0
    assert "Dangerous command" in result.output


def test_fix_nothing_to_do_shows_alternatives(cli_corrector):
    result = runner.invoke(app, ["fix", "cat notes.md"])
    assert result.exit_code == 0
    assert "No correction needed" in result.output
    assert "bat" in result.output


def test_fix_with_history(cli_corrector, clean_registry):
    reader = MagicMock()
    reader.read_commands.return_value = ["deploy-app --verbose"]
    clean_registry.register("history_reader", reader)

    result = runner.invoke(app, ["fix", "--history", "deploy-app --verbsoe"])

    assert result.exit_code == 0
    assert "deploy-app --verbose" in result.output
    reader.read_commands.assert_called_once()


def test_fix_execute_falls_back_to_diagnosis(cli_corrector, fake_engine):
    fake_engine.run_for_diagnosis.return_value = (UPSTREAM_OUTPUT, 128)
    result = runner.invoke(app, ["fix", "-x", "git push"])
    assert result.exit_code == 0
    assert "--set-upstream origin feature-x" in result.output


def test_diagnose(cli_corrector, fake_engine):
    fake_engine.run_for_diagnosis.return_value = (UPSTREAM_OUTPUT, 128)
    result = runner.invoke(app, ["diagnose", "git push"])
    assert result.exit_code == 0
    assert "--set-upstream origin feature-x" in result.output


def test_diagnose_without_fix(cli_corrector, fake_engine):
    fake_engine.run_for_diagnosis.return_value = ("", 0)
    result = runner.invoke(app, ["diagnose", "make"])
    assert result.exit_code == 0
    assert "No known fix" in result.output


def test_flags(cli_corrector):
    result = runner.invoke(app, ["flags", "docker", "--", "-it"])
    assert result.exit_code == 0
    assert "--interactive" in result.output
    assert "--tty" in result.output


def test_typos(cli_corrector):
    result = runner.invoke(app, ["typos"])
    assert result.exit_code == 0
    assert "gti" in result.output


def test_config_show():
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 0
    assert "history_max_distance" in result.output


def test_config_init():
    result = runner.invoke(app, ["config", "--init"])
    assert result.exit_code == 0
    assert config_manager.config_file.exists()
