"""
IoC Container

Registers services under an identifier (a string or a class) and resolves
them under one of three lifetimes:

    transient  — new instance on every resolve, never cached
    singleton  — created once, cached for the root container's lifetime
    scoped     — cached per scope; outside a scope every resolve is fresh

Registration is last-write-wins. Scopes created with create_scope() copy the
registrations, keep their own scoped cache and delegate inherited singletons
to the root container so one instance is shared by every scope. Singletons
registered on a scope are cached by that scope and disposed with it.
"""

from __future__ import annotations

import inspect
import logging
import typing
import uuid
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from cms_sdk.exceptions import CircularDependencyError, ServiceNotRegisteredError

logger = logging.getLogger(__name__)

ServiceIdentifier = Any


class ServiceLifetime(str, Enum):
    TRANSIENT = "transient"
    SINGLETON = "singleton"
    SCOPED = "scoped"


# ── Factories ─────────────────────────────────────────────────────────────────


class ServiceFactory(ABC):
    """Creates (and optionally tears down) one kind of service."""

    @abstractmethod
    def create(self, container: Container) -> Any:
        ...

    def dispose(self, instance: Any) -> Any:  # noqa: B027
        """Release a singleton instance. May return an awaitable."""


class CallableFactory(ServiceFactory):
    """Wraps ``create(container)`` and an optional ``dispose(instance)``."""

    def __init__(self, create: Callable[[Container], Any], dispose: Callable[[Any], Any] | None = None):
        self._create = create
        self._dispose = dispose

    def create(self, container: Container) -> Any:
        return self._create(container)

    def dispose(self, instance: Any) -> Any:
        if self._dispose is not None:
            return self._dispose(instance)
        return None


class InstanceFactory(ServiceFactory):
    def __init__(self, instance: Any):
        self.instance = instance

    def create(self, container: Container) -> Any:
        return self.instance


class ClassFactory(ServiceFactory):
    """Constructs a class, injecting ``__init__`` parameters from the container.

    Each parameter is resolved by name first, then by its annotated type.
    Parameters with a default are left alone when neither is registered.
    """

    def __init__(self, cls: type):
        self.cls = cls

    def create(self, container: Container) -> Any:
        try:
            signature = inspect.signature(self.cls)
        except (TypeError, ValueError):
            return self.cls()
        try:
            hints = typing.get_type_hints(self.cls.__init__)
        except Exception:
            hints = {}

        kwargs: dict[str, Any] = {}
        for name, param in signature.parameters.items():
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            if container.is_registered(name):
                kwargs[name] = container.resolve(name)
                continue
            annotation = hints.get(name, param.annotation)
            if annotation is not inspect.Parameter.empty and container.is_registered(annotation):
                kwargs[name] = container.resolve(annotation)
                continue
            if param.default is inspect.Parameter.empty:
                raise ServiceNotRegisteredError(f"{name} (required by {self.cls.__name__})")
        return self.cls(**kwargs)


def _to_factory(provider: Any) -> ServiceFactory:
    if isinstance(provider, ServiceFactory):
        return provider
    if isinstance(provider, type):
        return ClassFactory(provider)
    if callable(provider):
        return CallableFactory(provider)
    return InstanceFactory(provider)


@dataclass
class ServiceRegistration:
    factory: ServiceFactory
    lifetime: ServiceLifetime
    metadata: dict[str, Any] = field(default_factory=dict)


# ── Container ─────────────────────────────────────────────────────────────────


class Container:
    def __init__(self) -> None:
        self._registrations: dict[ServiceIdentifier, ServiceRegistration] = {}
        self._instances: dict[ServiceIdentifier, Any] = {}
        self._scoped_instances: dict[str, dict[ServiceIdentifier, Any]] = {}
        self._creating: list[ServiceIdentifier] = []
        self._scope_id: str | None = None
        self._root: Container = self

    @property
    def scope_id(self) -> str | None:
        return self._scope_id

    # ── Registration ──────────────────────────────────────────────────────────

    def register(
        self,
        identifier: ServiceIdentifier,
        provider: Any,
        lifetime: ServiceLifetime = ServiceLifetime.TRANSIENT,
        metadata: dict[str, Any] | None = None,
    ) -> Container:
        """Register a factory, class, callable or instance under ``identifier``.

        Callables receive the container; classes get constructor injection;
        anything else is returned as-is. Re-registering replaces the entry.
        A callable that is itself the service (e.g. a composed Pipeline) must
        be wrapped in ``InstanceFactory`` or it is treated as a factory.
        """
        self._registrations[identifier] = ServiceRegistration(
            factory=_to_factory(provider),
            lifetime=ServiceLifetime(lifetime),
            metadata=dict(metadata or {}),
        )
        logger.debug("Registered service %s (%s)", identifier, lifetime)
        return self

    def register_singleton(
        self, identifier: ServiceIdentifier, provider: Any, metadata: dict[str, Any] | None = None
    ) -> Container:
        return self.register(identifier, provider, ServiceLifetime.SINGLETON, metadata)

    def register_scoped(
        self, identifier: ServiceIdentifier, provider: Any, metadata: dict[str, Any] | None = None
    ) -> Container:
        return self.register(identifier, provider, ServiceLifetime.SCOPED, metadata)

    def is_registered(self, identifier: ServiceIdentifier) -> bool:
        try:
            return identifier in self._registrations
        except TypeError:
            # unhashable annotations can never be identifiers
            return False

    def get_metadata(self, identifier: ServiceIdentifier) -> dict[str, Any] | None:
        registration = self._registrations.get(identifier)
        return registration.metadata if registration else None

    # ── Resolution ────────────────────────────────────────────────────────────

    def resolve(self, identifier: ServiceIdentifier) -> Any:
        registration = self._registrations.get(identifier)
        if registration is None:
            raise ServiceNotRegisteredError(identifier)

        # only registrations inherited from the root share the root's instance;
        # singletons registered on the scope itself are cached by the scope
        if (
            registration.lifetime is ServiceLifetime.SINGLETON
            and self._root is not self
            and self._root._registrations.get(identifier) is registration
        ):
            return self._root.resolve(identifier)

        if identifier in self._creating:
            raise CircularDependencyError(identifier, [*self._creating, identifier])

        cache = self._cache_for(registration.lifetime)
        if cache is not None and identifier in cache:
            return cache[identifier]

        self._creating.append(identifier)
        try:
            instance = registration.factory.create(self)
        finally:
            self._creating.pop()

        if cache is not None:
            cache[identifier] = instance
        return instance

    def _cache_for(self, lifetime: ServiceLifetime) -> dict[ServiceIdentifier, Any] | None:
        if lifetime is ServiceLifetime.SINGLETON:
            return self._instances
        if lifetime is ServiceLifetime.SCOPED and self._scope_id is not None:
            return self._scoped_instances.setdefault(self._scope_id, {})
        return None

    # ── Scopes & disposal ─────────────────────────────────────────────────────

    def create_scope(self) -> Container:
        scope = Container()
        scope._registrations = dict(self._registrations)
        scope._root = self._root
        scope._scope_id = f"scope_{uuid.uuid4().hex}"
        return scope

    async def dispose(self) -> None:
        """Run each cached singleton's disposer, then drop every cache."""
        for identifier, instance in list(self._instances.items()):
            registration = self._registrations.get(identifier)
            if registration is None:
                continue
            try:
                result = registration.factory.dispose(instance)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("Error disposing service %s", identifier)

        self._instances.clear()
        self._scoped_instances.clear()
        self._creating.clear()
