# wut/api/__init__.py
"""
Lazy accessors for wut components.
"""
from .corrector import (
    get_corrector, get_rule_engine, get_execution_engine,
    get_history_reader, get_terminal_formatter,
)

__all__ = [
    "get_corrector", "get_rule_engine", "get_execution_engine",
    "get_history_reader", "get_terminal_formatter",
]
