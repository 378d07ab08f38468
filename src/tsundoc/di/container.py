from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Set, Type

from tsundoc.errors import TsundocError


class CircularDependencyError(TsundocError):
    """Raised when a circular dependency is detected during resolution."""


class ResolutionError(TsundocError):
    """Raised when a dependency cannot be resolved."""


class Lifetime(Enum):
    SINGLETON = "singleton"
    TRANSIENT = "transient"


@dataclass
class Registration:
    interface: Type
    factory: Callable[[Container], Any]
    lifetime: Lifetime = Lifetime.TRANSIENT


class Container:
    """Explicit dependency graph; factories receive the container itself."""

    def __init__(self) -> None:
        self._registrations: Dict[Type, Registration] = {}
        self._singleton_instances: Dict[Type, Any] = {}
        self._resolving: Set[Type] = set()

    def register_singleton(
        self, interface: Type, factory: Optional[Callable[[Container], Any]] = None
    ) -> None:
        self._registrations[interface] = Registration(
            interface=interface,
            factory=factory or (lambda _c: interface()),
            lifetime=Lifetime.SINGLETON,
        )
        self._singleton_instances.pop(interface, None)

    def register_factory(self, interface: Type, factory: Callable[[Container], Any]) -> None:
        self._registrations[interface] = Registration(interface=interface, factory=factory)

    def register_instance(self, interface: Type, instance: Any) -> None:
        self.register_singleton(interface, lambda _c: instance)
        self._singleton_instances[interface] = instance

    def is_registered(self, interface: Type) -> bool:
        return interface in self._registrations

    def resolve(self, interface: Type) -> Any:
        reg = self._registrations.get(interface)
        if reg is None:
            raise ResolutionError(f"No registration found for {interface}")
        if reg.lifetime is Lifetime.SINGLETON and interface in self._singleton_instances:
            return self._singleton_instances[interface]
        if interface in self._resolving:
            raise CircularDependencyError(f"Circular dependency detected for {interface}")
        self._resolving.add(interface)
        try:
            instance = reg.factory(self)
        finally:
            self._resolving.discard(interface)
        if reg.lifetime is Lifetime.SINGLETON:
            self._singleton_instances[interface] = instance
        return instance
