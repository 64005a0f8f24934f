"""Dishka DI container."""

from org_api.setup.ioc.container import (
    AppProvider,
    InfrastructureProvider,
    create_container,
)

__all__ = [
    "AppProvider",
    "InfrastructureProvider",
    "create_container",
]
