# wut/core/__init__.py
from .registry import registry, ServiceRegistry

__all__ = ["registry", "ServiceRegistry"]
