# wut/cli/__init__.py
"""Command-line interface for wut."""
from .main import app

__all__ = ['app']
