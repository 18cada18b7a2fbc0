"""
Binding Container.

This module provides the binding container used to decouple what a
component needs (an abstract identifier) from what satisfies it (a factory
decided at resolution time).
"""

import threading
from typing import Any, Callable, Dict, List, Optional
from abc import ABC, abstractmethod

import structlog

from plugboard.core.domain.devices import PowerInterface, create_device
from plugboard.shared.contracts import require
from plugboard.shared.exceptions import BindingNotFoundError, describe_identifier
from plugboard.shared.types import DeviceKind, Factory, Identifier

logger = structlog.get_logger(__name__)


class Container:
    """
    Registry of identifier to factory bindings.

    Provides:
    - One factory per identifier, last ``bind`` wins
    - Lazy resolution: factories run on every ``make``, nothing is cached
    - Factories receive the container so they can resolve their own dependencies

    ``bind`` calls are serialized; ``make`` only reads the mapping.
    """

    def __init__(self):
        """Initialize an empty container."""
        self._bindings: Dict[Identifier, Factory] = {}
        self._lock = threading.Lock()

    @require(lambda self, identifier, factory: callable(factory), "Factory must be callable")
    def bind(self, identifier: Identifier, factory: Factory) -> None:
        """
        Register a factory under an identifier.

        Args:
            identifier: String key or type token
            factory: Callable taking the container and returning an instance
        """
        with self._lock:
            replaced = identifier in self._bindings
            self._bindings[identifier] = factory

        logger.debug(
            "Binding registered",
            identifier=describe_identifier(identifier),
            replaced=replaced
        )

    def make(self, identifier: Identifier) -> Any:
        """
        Resolve an identifier by invoking its factory.

        Args:
            identifier: Previously bound identifier

        Returns:
            Whatever the factory produced for this call

        Raises:
            BindingNotFoundError: If nothing is bound under the identifier
        """
        factory = self._bindings.get(identifier)
        if factory is None:
            logger.debug("Binding not found", identifier=describe_identifier(identifier))
            raise BindingNotFoundError(identifier)

        logger.debug("Resolving binding", identifier=describe_identifier(identifier))
        return factory(self)

    def has(self, identifier: Identifier) -> bool:
        """Check if an identifier is bound."""
        return identifier in self._bindings

    def identifiers(self) -> List[Identifier]:
        """Snapshot of all bound identifiers."""
        return list(self._bindings)

    def __contains__(self, identifier: Identifier) -> bool:
        return self.has(identifier)

    def __len__(self) -> int:
        return len(self._bindings)


class ServiceProvider(ABC):
    """Abstract base class for service providers."""

    @abstractmethod
    def register(self, container: Container) -> None:
        """Register bindings in the container."""
        pass


class PowerServiceProvider(ServiceProvider):
    """Binds the power capability to the device picked by the current selector."""

    def __init__(self, selector: Callable[[], Optional[str]]):
        """
        Args:
            selector: Returns the raw device selector at resolution time
        """
        self.selector = selector

    def register(self, container: Container) -> None:
        """Configure power services."""

        def make_power(app: Container) -> PowerInterface:
            return create_device(DeviceKind.parse(self.selector()))

        container.bind(PowerInterface, make_power)

        logger.info("Power services configured")


def build_container(*providers: ServiceProvider) -> Container:
    """
    Create a container and let each provider register its bindings.

    Returns:
        Configured container instance
    """
    container = Container()

    for provider in providers:
        logger.debug("Registering provider", provider=type(provider).__name__)
        provider.register(container)

    logger.info("Container initialized", bindings=len(container))
    return container
