# wut/core/registry.py
"""
Service registry for wut.

Components are created lazily the first time they are requested and shared
afterwards. Creation is guarded by a re-entrant lock so concurrent callers
always receive the same instance.
"""
from typing import Dict, Any, Type, Optional, Callable, TypeVar, List
import logging
import threading

T = TypeVar('T')


class ServiceRegistry:
    """Lazily populated, thread-safe map of named services."""

    _instance = None
    _lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> 'ServiceRegistry':
        """Get the singleton instance of the registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = ServiceRegistry()
        return cls._instance

    def __init__(self):
        self._services: Dict[str, Any] = {}
        self._factories: Dict[str, Callable[[], Any]] = {}
        self._initialization_order: List[str] = []
        self._logger = logging.getLogger(__name__)

    def register(self, name: str, service: Any) -> Any:
        """
        Register a service with the registry.

        Args:
            name: Unique identifier for the service
            service: The service instance to register

        Returns:
            The registered service (for method chaining)
        """
        with self._lock:
            self._services[name] = service
            if name not in self._initialization_order:
                self._initialization_order.append(name)

            self._logger.debug(f"Registered service: {name} ({type(service).__name__})")
            return service

    def register_factory(self, name: str, factory: Callable[[], Any]) -> None:
        """Register a factory used on first access to ``name``."""
        with self._lock:
            self._factories[name] = factory
            self._logger.debug(f"Registered factory for: {name}")

    def get(self, name: str) -> Optional[Any]:
        """Return the named service, building it from its factory if needed."""
        if name in self._services:
            return self._services[name]

        if name in self._factories:
            with self._lock:
                if name in self._services:
                    return self._services[name]

                self._logger.debug(f"Creating service via factory: {name}")
                return self.register(name, self._factories[name]())

        return None

    def get_or_create(self, name: str, cls: Type[T], *args, **kwargs) -> T:
        """
        Get a service or create it if it doesn't exist.

        Args:
            name: Service name
            cls: Class (or zero-argument callable) to build the service
            *args, **kwargs: Arguments to pass to the constructor

        Returns:
            The existing or newly created service
        """
        service = self.get(name)
        if service is not None:
            return service

        with self._lock:
            if name in self._services:
                return self._services[name]

            self._logger.debug(f"Creating service: {name} ({getattr(cls, '__name__', cls)})")
            return self.register(name, cls(*args, **kwargs))

    def clear(self) -> None:
        """Clear all registered services."""
        with self._lock:
            self._services.clear()
            self._factories.clear()
            self._initialization_order.clear()

    def get_initialization_order(self) -> List[str]:
        with self._lock:
            return self._initialization_order.copy()


registry = ServiceRegistry.get_instance()
