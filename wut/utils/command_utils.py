# wut/utils/command_utils.py
"""Utility functions for command processing."""

from typing import List, Tuple

# Commands that take over the terminal or wait for input; never probe these
INTERACTIVE_COMMANDS = [
    "vim", "vi", "nvim", "nano", "emacs", "pico", "less", "more", "man",
    "top", "htop", "btop", "iotop", "iftop", "nmon", "glances", "atop",
    "watch", "ssh", "telnet", "nc", "netcat", "ftp", "sftp",
    "mysql", "psql", "sqlite3", "mongo", "mongosh", "redis-cli",
    "gdb", "lldb", "pdb", "tmux", "screen",
    "python", "python3", "ipython", "node", "irb", "ghci", "lua",
]


def split_command(command: str) -> List[str]:
    """Whitespace tokenization used by every stage of the corrector."""
    return command.split()


def get_root_command(command: str) -> str:
    """Return the lowercased first token of a command line, or an empty string."""
    tokens = split_command(command)
    return tokens[0].lower() if tokens else ""


def is_interactive_command(command: str) -> Tuple[bool, str]:
    """
    Check if a command is interactive (taking over the terminal).

    Args:
        command: The command to check

    Returns:
        Tuple of (is_interactive, base_command)
    """
    tokens = split_command(command)
    if not tokens:
        # Nothing to run is treated like something we must not run
        return (True, "")

    base_cmd = tokens[0].lower()
    is_interactive = base_cmd in INTERACTIVE_COMMANDS

    # Special cases with flags
    if not is_interactive:
        if base_cmd == "ping" and "-c" not in tokens:
            is_interactive = True
        elif base_cmd in ("tail", "journalctl") and ("-f" in tokens or "--follow" in tokens):
            is_interactive = True

    return (is_interactive, base_cmd)
