"""
Service scaffolding.

Generates a stub service module with a single ``handle`` method.
"""

import keyword
import re
from pathlib import Path
from typing import Union

import structlog

from plugboard.shared.exceptions import ServiceAlreadyExistsError, ValidationError

logger = structlog.get_logger(__name__)

DIRECTORY_MODE = 0o755

SERVICE_TEMPLATE = '''"""{name} service."""


class {name}:
    """{name} service."""

    def handle(self):
        # Your business logic here
        pass
'''

_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")
_ALLOWED_NAME_RE = re.compile(r"[A-Za-z0-9_\- ]+")


def split_words(name: str) -> list:
    """Split ``payment-gateway``, ``payment_gateway`` or ``PaymentGateway`` into words."""
    return _WORD_RE.findall(name)


def studly_case(name: str) -> str:
    """Convert a name to StudlyCase: ``payment_gateway`` -> ``PaymentGateway``."""
    return "".join(word[:1].upper() + word[1:] for word in split_words(name))


def snake_case(name: str) -> str:
    """Convert a name to snake_case: ``PaymentGateway`` -> ``payment_gateway``."""
    return "_".join(word.lower() for word in split_words(name))


def is_valid_identifier(value: str) -> bool:
    """True when ``value`` can be used as a Python class or module name."""
    return value.isidentifier() and not keyword.iskeyword(value)


def make_service(name: str, directory: Union[str, Path] = "services") -> Path:
    """
    Create a new service module.

    Args:
        name: Service name made of ASCII letters, digits, ``_``, ``-`` or spaces
        directory: Directory that holds service modules, created if missing

    Returns:
        Path of the written module

    Raises:
        ValidationError: If the name cannot become an importable module and class
        ServiceAlreadyExistsError: If the module already exists
    """
    if not _ALLOWED_NAME_RE.fullmatch(name):
        raise ValidationError(
            f"Invalid service name: {name!r} (use ASCII letters, digits, '_', '-' or spaces)",
            field="name",
            value=name
        )

    class_name = studly_case(name)
    module_name = snake_case(name)
    for identifier in (class_name, module_name):
        if not is_valid_identifier(identifier):
            raise ValidationError(f"Invalid service name: {name!r}", field="name", value=name)

    directory = Path(directory)
    path = directory / f"{module_name}.py"

    directory.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)

    if path.exists():
        raise ServiceAlreadyExistsError(class_name, str(path))

    path.write_text(SERVICE_TEMPLATE.format(name=class_name), encoding="utf-8")

    logger.info("Service created", service=class_name, path=str(path))
    return path
