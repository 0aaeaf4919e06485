# tests/conftest.py
"""
Common test fixtures for wut.
"""
import os
import tempfile

# Keep configuration and logs out of the real home directory
os.environ.setdefault("WUT_CONFIG_DIR", tempfile.mkdtemp(prefix="wut-test-"))

import pytest
from pathlib import Path
from unittest.mock import AsyncMock

from wut.config import CorrectorConfig
from wut.core.registry import registry
from wut.corrector.corpus import CorpusStore, get_default_store
from wut.corrector.corrector import Corrector
from wut.corrector.evaluator import RuleEngine


@pytest.fixture
def store():
    """The built-in corpus store."""
    return get_default_store()


@pytest.fixture
def tiny_store():
    """A small store whose tie-breaks and matches are easy to reason about."""
    return CorpusStore(
        root_commands=("git", "docker", "ls", "ln"),
        subcommands={
            "git": ("status", "stash", "commit", "push"),
            "docker": ("run", "ps"),
        },
        long_flags={
            "git": ("force", "message", "amend"),
            "docker": ("name", "detach"),
        },
        short_flags={
            "docker": {
                "i": ("--interactive", "Keep STDIN open"),
                "t": ("--tty", "Allocate a pseudo-TTY"),
                "d": ("--detach", "Run container in background"),
            },
        },
        global_words=("install", "verbose", "path"),
        dangerous_commands=("rm -rf /",),
        modern_alternatives={"ls": ("exa",)},
        root_typos={"gti": "git"},
        command_typos={"git satus": "git status"},
        prefixable_tools=("git", "docker"),
    )


@pytest.fixture
def fake_engine():
    """An execution engine whose probe output is set per test."""
    engine = AsyncMock()
    engine.run_for_diagnosis.return_value = ("", 0)
    return engine


@pytest.fixture
def rule_engine(fake_engine):
    return RuleEngine(execution_engine=fake_engine, timeout=1.0)


@pytest.fixture
def corrector(store, rule_engine):
    """Corrector over the built-in corpora with a fake probe."""
    return Corrector(store=store, rule_engine=rule_engine, config=CorrectorConfig())


@pytest.fixture
def clean_registry():
    """Start and finish with an empty service registry."""
    registry.clear()
    yield registry
    registry.clear()


@pytest.fixture
def history_home(tmp_path, monkeypatch):
    """A home directory holding bash, zsh and fish history files."""
    monkeypatch.delenv("HISTFILE", raising=False)

    (tmp_path / ".bash_history").write_text(
        "git status\n"
        "docker ps\n"
        "ls\n"
        "git status\n"
        "export API_TOKEN=abc123\n"
        "make build\n"
    )
    (tmp_path / ".zsh_history").write_text(
        ": 1700000000:0;git pull\n"
        ": 1700000200:0;cargo build --release\n"
    )
    fish_dir = tmp_path / ".local" / "share" / "fish"
    fish_dir.mkdir(parents=True)
    (fish_dir / "fish_history").write_text(
        "- cmd: npm test\n"
        "  when: 1700000100\n"
        "- cmd: go build ./...\n"
        "  when: 1700000300\n"
    )
    return Path(tmp_path)
