# wut/api/corrector.py
"""
Public API for the correction components.

This module provides functions to access correction components with lazy initialization.
"""
from wut.core.registry import registry


def get_execution_engine():
    """Get the execution engine instance."""
    from wut.execution.engine import ExecutionEngine
    return registry.get_or_create("execution_engine", ExecutionEngine)


def get_rule_engine():
    """Get the output-driven rule engine instance."""
    from wut.config import config_manager
    from wut.corrector.evaluator import RuleEngine
    return registry.get_or_create(
        "rule_engine",
        RuleEngine,
        execution_engine=get_execution_engine(),
        timeout=config_manager.config.corrector.rule_timeout,
    )


def get_corrector():
    """Get the correction pipeline instance."""
    from wut.corrector.corrector import Corrector
    return registry.get_or_create("corrector", Corrector, rule_engine=get_rule_engine())


def get_history_reader():
    """Get the shell history reader instance."""
    from wut.context.history import ShellHistoryReader
    return registry.get_or_create("history_reader", ShellHistoryReader)


def get_terminal_formatter():
    """Get the terminal formatter instance."""
    from wut.shell.formatter import TerminalFormatter
    return registry.get_or_create("terminal_formatter", TerminalFormatter)
