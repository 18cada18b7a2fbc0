"""
HTML view for the power page.
"""

from html import escape
from typing import Optional

from plugboard.shared.types import DeviceKind

DEVICE_LABELS = {
    DeviceKind.FAN: "\U0001F300 Fan",
    DeviceKind.LIGHT: "\U0001F4A1 Light",
    DeviceKind.TV: "\U0001F4FA TV",
}

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Smart Plug Board Demo</title>
    <style>
        body {{ font-family: Arial, sans-serif; text-align: center; margin-top: 100px; }}
        select, button {{ padding: 8px 15px; font-size: 16px; }}
        .message {{ margin-top: 30px; font-size: 22px; font-weight: bold; }}
    </style>
</head>
<body>
    <h1>Smart Plug Board (Binding Container)</h1>

    <form method="GET" action="{action}">
        <label for="device">Select a device:</label>
        <select name="device" id="device">
{options}
        </select>
        <button type="submit">Turn On</button>
    </form>
{message}
</body>
</html>
"""


def render_power_page(action: str, selected: Optional[DeviceKind], message: Optional[str] = None) -> str:
    """
    Render the device selection form and the status of the powered device.

    Args:
        action: URL the form submits to
        selected: Device whose option is pre-selected, if any
        message: Status text of the device that was turned on
    """
    options = []
    for kind, label in DEVICE_LABELS.items():
        marker = " selected" if selected == kind else ""
        options.append(f'            <option value="{kind.value}"{marker}>{label}</option>')

    message_html = ""
    if message is not None:
        message_html = f'\n    <div class="message">{escape(message)}</div>'

    return PAGE_TEMPLATE.format(
        action=escape(action, quote=True),
        options="\n".join(options),
        message=message_html,
    )
