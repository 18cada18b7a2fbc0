"""
Devices that can be plugged into the board.

Every device satisfies the same power capability: turning it on yields a
human readable status message. The controller only ever sees
``PowerInterface``; which concrete device it receives is decided by the
container binding.
"""

from abc import abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Dict, Protocol, Type, runtime_checkable

from plugboard.shared.types import DeviceKind


@runtime_checkable
class PowerInterface(Protocol):
    """Protocol for anything that can be powered on."""

    kind: DeviceKind

    @abstractmethod
    def turn_on(self) -> str:
        """Power the device on and describe what it is doing."""
        ...


@dataclass(frozen=True)
class Fan:
    """Ceiling fan."""
    kind: ClassVar[DeviceKind] = DeviceKind.FAN

    def turn_on(self) -> str:
        return "Fan is spinning!"


@dataclass(frozen=True)
class Light:
    """Light bulb."""
    kind: ClassVar[DeviceKind] = DeviceKind.LIGHT

    def turn_on(self) -> str:
        return "Light is shining!"


@dataclass(frozen=True)
class TV:
    """Television set."""
    kind: ClassVar[DeviceKind] = DeviceKind.TV

    def turn_on(self) -> str:
        return "TV is playing!"


DEVICE_TYPES: Dict[DeviceKind, Type[PowerInterface]] = {
    DeviceKind.FAN: Fan,
    DeviceKind.LIGHT: Light,
    DeviceKind.TV: TV,
}


def create_device(kind: DeviceKind) -> PowerInterface:
    """Build a fresh device for the given kind."""
    return DEVICE_TYPES[kind]()
