"""
Power control use case.

The controller is handed its power capability through the constructor and
never knows which device it is driving.
"""

from dataclasses import dataclass

import structlog

from plugboard.core.domain.devices import PowerInterface
from plugboard.shared.types import DeviceKind

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PowerStatus:
    """Outcome of switching a device on."""
    device: DeviceKind
    message: str


class PowerController:
    """Turns on whatever device the container resolved."""

    def __init__(self, power: PowerInterface):
        self.power = power

    def show(self) -> PowerStatus:
        """
        Switch the device on.

        Returns:
            The device kind together with its status message
        """
        message = self.power.turn_on()
        logger.info("Device turned on", device=self.power.kind.value)
        return PowerStatus(device=self.power.kind, message=message)
