"""
Global pytest configuration and fixtures for plug board tests.
"""
import pytest
from fastapi.testclient import TestClient

from plugboard.application.api.request_context import current_device_selector
from plugboard.application.models import APIConfig
from plugboard.infrastructure.di.container import Container, PowerServiceProvider, build_container
from plugboard.main import create_application


@pytest.fixture
def container() -> Container:
    """Empty container for testing."""
    return Container()


@pytest.fixture
def power_container() -> Container:
    """Container with the power binding wired to the request selector."""
    return build_container(PowerServiceProvider(selector=current_device_selector))


@pytest.fixture
def client(power_container: Container) -> TestClient:
    """HTTP client for a freshly built application."""
    app = create_application(container=power_container, config=APIConfig())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def unbound_client() -> TestClient:
    """HTTP client for an application whose container has no bindings."""
    app = create_application(container=Container(), config=APIConfig())
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
