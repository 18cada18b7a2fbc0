"""
Request scoped device selector.

The power binding is registered once at startup, but the device it builds
depends on the current request. The selector is published here for the
duration of a resolution and read back by the binding's factory.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

_device_selector: ContextVar[Optional[str]] = ContextVar("device_selector", default=None)


def current_device_selector() -> Optional[str]:
    """Raw ``device`` value of the request being served, if any."""
    return _device_selector.get()


@contextmanager
def device_selection(value: Optional[str]) -> Iterator[None]:
    """Expose ``value`` as the current selector inside the block."""
    token = _device_selector.set(value)
    try:
        yield
    finally:
        _device_selector.reset(token)
