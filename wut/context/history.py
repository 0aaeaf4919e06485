# wut/context/history.py
"""
Reader for the history files of bash, zsh and fish.

The commands it returns feed the history fallback matcher: newest first,
de-duplicated, without trivial or sensitive commands.
"""
import os
import re
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from wut.config import config_manager
from wut.utils.logging import get_logger

logger = get_logger(__name__)

# Commands not worth suggesting from history
TRIVIAL_COMMANDS = (
    "ls", "cd", "pwd", "exit", "clear", "history",
    "fg", "bg", "jobs", "echo", "cat", "man",
)

SENSITIVE_WORDS = (
    "password", "passwd", "secret", "token", "key",
    "api_key", "apikey", "private_key", "credential",
)

ZSH_EXTENDED = re.compile(r"^: (\d+):\d+;(.*)$")
FISH_CMD = re.compile(r"^\s*- cmd:\s*(.+)$")
FISH_WHEN = re.compile(r"^\s*when:\s*(\d+)$")


@dataclass
class HistoryEntry:
    """A single command read from a shell history file."""
    command: str
    shell: str
    timestamp: Optional[datetime] = None
    position: int = 0


def _parse_timestamp(value: str) -> Optional[datetime]:
    try:
        return datetime.fromtimestamp(int(value.strip()), tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return None


def should_skip_command(command: str) -> bool:
    """Skip empty, one-character and trivial commands."""
    if len(command) < 2:
        return True
    lowered = command.lower()
    return any(lowered == trivial or lowered.startswith(trivial + " ") for trivial in TRIVIAL_COMMANDS)


def is_sensitive(command: str) -> bool:
    lowered = command.lower()
    return any(word in lowered for word in SENSITIVE_WORDS)


def parse_bash_history(lines: Iterable[str]) -> List[HistoryEntry]:
    """Plain lines, optionally preceded by ``#<epoch>`` timestamp lines."""
    entries: List[HistoryEntry] = []
    timestamp = None
    for line in lines:
        line = line.strip()
        if not line:
            continue
        if line.startswith("#"):
            parsed = _parse_timestamp(line[1:])
            if parsed is not None:
                timestamp = parsed
            continue
        entries.append(HistoryEntry(line, "bash", timestamp))
        timestamp = None
    return entries


def parse_zsh_history(lines: Iterable[str]) -> List[HistoryEntry]:
    """Extended (``: <epoch>:<duration>;command``) or plain zsh history."""
    entries: List[HistoryEntry] = []
    for line in lines:
        line = line.rstrip("\n")
        match = ZSH_EXTENDED.match(line)
        if match:
            entries.append(HistoryEntry(match.group(2).strip(), "zsh", _parse_timestamp(match.group(1))))
        elif line.strip() and not line.startswith(":"):
            entries.append(HistoryEntry(line.strip(), "zsh"))
    return entries


def parse_fish_history(lines: Iterable[str]) -> List[HistoryEntry]:
    """The YAML-like ``- cmd:`` / ``when:`` format fish writes."""
    entries: List[HistoryEntry] = []
    current: Optional[HistoryEntry] = None
    for line in lines:
        match = FISH_CMD.match(line)
        if match:
            if current is not None:
                entries.append(current)
            current = HistoryEntry(match.group(1).strip(), "fish")
            continue
        match = FISH_WHEN.match(line)
        if match and current is not None:
            current.timestamp = _parse_timestamp(match.group(1))
    if current is not None:
        entries.append(current)
    return entries


PARSERS = {
    "bash": parse_bash_history,
    "zsh": parse_zsh_history,
    "fish": parse_fish_history,
}


class ShellHistoryReader:
    """Reads, filters and merges shell history files."""

    def __init__(self, home: Optional[Path] = None, max_entries: Optional[int] = None):
        self._home = Path(home) if home else Path.home()
        self._max_entries = max_entries

    @property
    def max_entries(self) -> int:
        if self._max_entries is not None:
            return self._max_entries
        return config_manager.config.history.max_entries

    def detect_history_files(self, shells: Optional[Iterable[str]] = None) -> Dict[str, Path]:
        """Return the existing history file for each requested shell."""
        shells = list(shells) if shells is not None else config_manager.config.history.shells
        candidates: Dict[str, List[Path]] = {
            "bash": [self._home / ".bash_history"],
            "zsh": [self._home / ".zsh_history", self._home / ".zhistory"],
            "fish": [self._home / ".local" / "share" / "fish" / "fish_history"],
        }

        histfile = os.environ.get("HISTFILE")
        if histfile:
            shell = "zsh" if "zsh" in histfile else "bash"
            candidates[shell].insert(0, Path(histfile))

        if sys.platform == "darwin":
            candidates["fish"].append(self._home / "Library" / "Application Support" / "fish" / "fish_history")

        found: Dict[str, Path] = {}
        for shell in shells:
            for path in candidates.get(shell, []):
                if path.is_file():
                    found[shell] = path
                    break
        return found

    def read_file(self, shell: str, path: Path) -> List[HistoryEntry]:
        """Parse one history file; unreadable files yield no entries."""
        parser = PARSERS.get(shell)
        if parser is None:
            logger.warning(f"Unsupported shell history format: {shell}")
            return []

        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                entries = parser(f)
        except OSError as e:
            logger.warning(f"Could not read {shell} history at {path}: {e}")
            return []

        for position, entry in enumerate(entries):
            entry.position = position
        logger.debug(f"Read {len(entries)} {shell} history entries from {path}")
        return entries

    def merge(self, entries: Iterable[HistoryEntry]) -> List[str]:
        """
        Filter and order entries for matching.

        Trivial and sensitive commands are dropped, duplicates collapse onto
        their newest occurrence and the result is ordered newest first,
        capped at ``max_entries``.
        """
        epoch = datetime.min.replace(tzinfo=timezone.utc)
        newest: Dict[str, HistoryEntry] = {}
        for entry in entries:
            command = entry.command
            if should_skip_command(command) or is_sensitive(command):
                continue
            existing = newest.get(command)
            if existing is None or (entry.timestamp or epoch, entry.position) >= (existing.timestamp or epoch, existing.position):
                newest[command] = entry

        ordered = sorted(
            newest.values(),
            key=lambda e: (e.timestamp or epoch, e.position),
            reverse=True,
        )
        return [entry.command for entry in ordered[: self.max_entries]]

    def read_commands(self, shells: Optional[Iterable[str]] = None) -> List[str]:
        """Commands from every detected history file, newest first."""
        if not config_manager.config.history.enabled:
            logger.debug("Shell history reading is disabled")
            return []

        files = self.detect_history_files(shells)
        if not files:
            logger.info("No shell history files found")
            return []

        entries: List[HistoryEntry] = []
        for shell, path in files.items():
            entries.extend(self.read_file(shell, path))
        return self.merge(entries)
