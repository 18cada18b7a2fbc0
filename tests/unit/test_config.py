"""
Unit tests for configuration and error mapping.
"""
from plugboard.application.models import APIConfig
from plugboard.shared.exceptions import (
    BindingNotFoundError,
    ServiceAlreadyExistsError,
    ValidationError,
    get_http_status_code,
    should_log_error
)


class TestAPIConfig:
    """Test cases for APIConfig."""

    def test_defaults(self, monkeypatch):
        """Test configuration without environment overrides."""
        monkeypatch.delenv("PLUGBOARD_TITLE", raising=False)
        monkeypatch.delenv("PLUGBOARD_CORS_ORIGINS", raising=False)

        config = APIConfig.from_env()

        assert config.title == "Smart Plug Board"
        assert config.cors_origins == ["*"]

    def test_environment_overrides(self, monkeypatch):
        """Test that environment variables override defaults."""
        monkeypatch.setenv("PLUGBOARD_TITLE", "Board")
        monkeypatch.setenv("PLUGBOARD_CORS_ORIGINS", "http://a.test, http://b.test,")

        config = APIConfig.from_env()

        assert config.title == "Board"
        assert config.cors_origins == ["http://a.test", "http://b.test"]


class TestErrorMapping:
    """Test cases for exception to HTTP status mapping."""

    def test_status_codes(self):
        """Test the mapped status codes."""
        assert get_http_status_code(BindingNotFoundError("power")) == 500
        assert get_http_status_code(ValidationError("bad")) == 400
        assert get_http_status_code(ServiceAlreadyExistsError("Mailer", "mailer.py")) == 409
        assert get_http_status_code(RuntimeError("x")) == 500

    def test_missing_bindings_are_logged(self):
        """Test that programming errors are logged and user errors are not."""
        assert should_log_error(BindingNotFoundError("power"))
        assert not should_log_error(ValidationError("bad"))
