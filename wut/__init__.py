# wut/__init__.py
"""
wut: shell-command assistant that spots typos, risky commands and known error fixes.
"""

__version__ = '0.1.0'


def init_application():
    """Initialize the shared components."""
    from wut.api.corrector import (
        get_corrector, get_history_reader, get_terminal_formatter,
    )

    # Built in dependency order; the corrector pulls in the rule and execution engines
    get_corrector()
    get_history_reader()
    get_terminal_formatter()
