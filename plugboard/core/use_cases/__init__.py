"""
Use cases (application services).

Use cases receive their collaborators through the constructor and contain
no framework code.
"""

from .power_control import PowerController, PowerStatus

__all__ = [
    "PowerController",
    "PowerStatus",
]
