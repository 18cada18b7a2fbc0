"""
Type definitions for the plug board.

This module contains the custom types shared across layers.
"""

from typing import Any, Callable, Optional
from enum import Enum


# A binding identifier is a string key or a type token
Identifier = Any
Factory = Callable[[Any], Any]


class DeviceKind(str, Enum):
    """Devices that can be plugged into the board."""
    FAN = "fan"
    LIGHT = "light"
    TV = "tv"

    @classmethod
    def default(cls) -> "DeviceKind":
        return cls.FAN

    @classmethod
    def parse(cls, value: Optional[str]) -> "DeviceKind":
        """
        Parse an external selector into a device kind.

        Matching is exact: absent or unknown values, including other
        casings such as ``"TV"``, fall back to the default device.
        """
        if value is None:
            return cls.default()
        try:
            return cls(value)
        except ValueError:
            return cls.default()
