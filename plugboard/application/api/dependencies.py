"""
FastAPI dependencies.

The container lives on ``app.state`` and is handed to route handlers
explicitly; the controller is assembled per request from a freshly resolved
power capability.
"""

from typing import Optional

from fastapi import Depends, Query, Request
import structlog

from plugboard.application.api.request_context import device_selection
from plugboard.core.domain.devices import PowerInterface
from plugboard.core.use_cases.power_control import PowerController
from plugboard.infrastructure.di.container import Container
from plugboard.shared.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)


def get_container(request: Request) -> Container:
    """
    Get the application container for dependency injection.

    Raises:
        ConfigurationError: If the application was built without a container
    """
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise ConfigurationError("Container not initialized")
    return container


async def get_power_controller(
    device: Optional[str] = Query(None, description="Device to turn on: fan, light or tv"),
    container: Container = Depends(get_container)
) -> PowerController:
    """
    Resolve the power capability for this request and wrap it in a controller.

    Returns:
        Controller driving the device picked by ``device``
    """
    with device_selection(device):
        power = container.make(PowerInterface)

    logger.debug("Power capability resolved", selector=device, device=power.kind.value)
    return PowerController(power)
