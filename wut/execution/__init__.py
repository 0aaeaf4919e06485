# wut/execution/__init__.py
"""
Bounded command execution used by the output-driven diagnosis.
"""
from .engine import ExecutionEngine

__all__ = ["ExecutionEngine"]
