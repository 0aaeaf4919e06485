# wut/context/__init__.py
"""Shell context readers."""
from .history import ShellHistoryReader, HistoryEntry

__all__ = ["ShellHistoryReader", "HistoryEntry"]
