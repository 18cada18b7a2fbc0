"""
Dependency injection infrastructure.

This module provides the binding container and the service providers that
populate it.
"""

from .container import (
    Container,
    ServiceProvider,
    PowerServiceProvider,
    build_container
)

__all__ = [
    "Container",
    "ServiceProvider",
    "PowerServiceProvider",
    "build_container"
]
