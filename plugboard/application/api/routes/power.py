"""
Power API routes.

This module provides the HTML power page and its JSON counterpart. Both
receive a ``PowerController`` whose device was resolved from the container
using the request's ``device`` parameter.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
import structlog

from plugboard.application.api.dependencies import get_power_controller
from plugboard.application.models import DeviceListResponse, PowerResponse
from plugboard.application.views import render_power_page
from plugboard.core.domain.devices import DEVICE_TYPES
from plugboard.core.use_cases.power_control import PowerController, PowerStatus
from plugboard.shared.types import DeviceKind

logger = structlog.get_logger(__name__)

# Mounted at the site root
page_router = APIRouter()

# Mounted under /api/v1/power
router = APIRouter()


@page_router.get("/", response_class=HTMLResponse, name="power")
async def show_power_page(
    request: Request,
    controller: PowerController = Depends(get_power_controller)
) -> HTMLResponse:
    """
    Render the smart plug board with the resolved device switched on.

    The dropdown marks the device that was actually turned on.
    """
    status = controller.show()
    html = render_power_page(
        action=str(request.url_for("power").path),
        selected=status.device,
        message=status.message
    )
    return HTMLResponse(content=html)


@router.get("/", response_model=PowerResponse)
async def turn_on(
    controller: PowerController = Depends(get_power_controller)
) -> PowerResponse:
    """
    Turn on the selected device.

    Returns:
        Device kind and its status message. Unknown or missing selectors
        fall back to the fan.
    """
    return PowerResponse.from_domain(controller.show())


@router.get("/devices", response_model=DeviceListResponse)
async def list_devices() -> DeviceListResponse:
    """
    List the devices the board can power.
    """
    devices = [
        PowerResponse.from_domain(PowerStatus(device=kind, message=device_type().turn_on()))
        for kind, device_type in DEVICE_TYPES.items()
    ]
    return DeviceListResponse(default=DeviceKind.default(), devices=devices)
