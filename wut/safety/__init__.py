# wut/safety/__init__.py
"""
Destructive-command detection.

Every analysis starts here: a dangerous command is flagged and nothing else
is attempted for it.
"""
from .detector import check_dangerous, is_dangerous

__all__ = ["check_dangerous", "is_dangerous"]
