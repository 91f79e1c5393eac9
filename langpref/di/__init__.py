"""Dependency injection module."""

from .container import ApplicationContainer, DIContainer, initialize_di, shutdown_di, get_di_container

__all__ = [
    "ApplicationContainer",
    "DIContainer",
    "initialize_di",
    "shutdown_di",
    "get_di_container",
]
