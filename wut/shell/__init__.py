# wut/shell/__init__.py
"""Terminal presentation."""
from .formatter import TerminalFormatter

__all__ = ["TerminalFormatter"]
