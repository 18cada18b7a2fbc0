"""
Contract programming helpers.

Provides a precondition decorator used to validate arguments at the
boundaries of the container.
"""

import functools
import inspect
from typing import Any, Callable, TypeVar

import structlog

from plugboard.shared.exceptions import PreconditionError

logger = structlog.get_logger(__name__)

F = TypeVar('F', bound=Callable[..., Any])


def require(predicate: Callable[..., bool], message: str) -> Callable[[F], F]:
    """
    Reject calls whose arguments fail ``predicate``.

    ``predicate`` is called with exactly the arguments of the decorated
    function. Errors raised by the predicate itself propagate unchanged.

    Raises:
        PreconditionError: With ``message`` when the predicate returns false
    """
    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        @functools.wraps(func)
        def checked(*args, **kwargs):
            if predicate(*args, **kwargs):
                return func(*args, **kwargs)

            arguments = signature.bind(*args, **kwargs).arguments
            logger.warning(
                "Precondition violation",
                function=func.__qualname__,
                message=message,
                arguments=sorted(arguments)
            )
            raise PreconditionError(message, details={"function": func.__qualname__})

        return checked  # type: ignore

    return decorator
