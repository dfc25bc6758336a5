"""
Dependency injection for the composition engine.

    Container        — registers and resolves services
    ServiceLifetime  — transient / singleton / scoped
    ServiceFactory   — base class for custom create/dispose factories
"""

from .ioc import (
    CallableFactory,
    ClassFactory,
    Container,
    InstanceFactory,
    ServiceFactory,
    ServiceLifetime,
    ServiceRegistration,
)

__all__ = [
    "CallableFactory",
    "ClassFactory",
    "Container",
    "InstanceFactory",
    "ServiceFactory",
    "ServiceLifetime",
    "ServiceRegistration",
]
