"""
Smart Plug Board.

A small FastAPI service demonstrating a binding container: the power
controller depends on an abstract power capability and the container decides
at request time which device (fan, light or TV) satisfies it.
"""

__version__ = "1.0.0"
