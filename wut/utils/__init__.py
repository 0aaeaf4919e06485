# wut/utils/__init__.py
"""Utility helpers shared across wut."""
from .logging import setup_logging, get_logger

__all__ = ["setup_logging", "get_logger"]
