"""
Unit tests for service scaffolding.
"""
import pytest

from plugboard.cli.make_service import make_service, snake_case, studly_case
from plugboard.shared.exceptions import ServiceAlreadyExistsError, ValidationError


class TestNaming:
    """Test cases for name conversion."""

    @pytest.mark.parametrize("raw,studly,snake", [
        ("payment", "Payment", "payment"),
        ("payment_gateway", "PaymentGateway", "payment_gateway"),
        ("payment-gateway", "PaymentGateway", "payment_gateway"),
        ("PaymentGateway", "PaymentGateway", "payment_gateway"),
        ("paymentGateway", "PaymentGateway", "payment_gateway"),
        ("HTTPClient", "HTTPClient", "http_client"),
    ])
    def test_conversions(self, raw, studly, snake):
        """Test StudlyCase and snake_case conversion."""
        assert studly_case(raw) == studly
        assert snake_case(raw) == snake


class TestMakeService:
    """Test cases for make_service."""

    def test_creates_module(self, tmp_path):
        """Test that a service module with a handle method is written."""
        path = make_service("payment_gateway", tmp_path)

        assert path == tmp_path / "payment_gateway.py"
        content = path.read_text(encoding="utf-8")
        assert "class PaymentGateway:" in content
        assert "def handle(self):" in content

    def test_generated_module_is_importable_code(self, tmp_path):
        """Test that the generated module compiles and defines the class."""
        path = make_service("Mailer", tmp_path)

        namespace = {}
        exec(compile(path.read_text(encoding="utf-8"), str(path), "exec"), namespace)

        assert namespace["Mailer"]().handle() is None

    def test_creates_missing_directory(self, tmp_path):
        """Test that nested directories are created on demand."""
        directory = tmp_path / "app" / "services"

        path = make_service("mailer", directory)

        assert directory.is_dir()
        assert path.exists()

    def test_existing_service_is_not_overwritten(self, tmp_path):
        """Test that an existing module is left untouched."""
        existing = tmp_path / "mailer.py"
        existing.write_text("# custom", encoding="utf-8")

        with pytest.raises(ServiceAlreadyExistsError, match="Service Mailer already exists!") as exc_info:
            make_service("mailer", tmp_path)

        assert exc_info.value.path == str(existing)
        assert existing.read_text(encoding="utf-8") == "# custom"

    @pytest.mark.parametrize("name", ["", "   ", "!!!", "123", "none", "true", "false", "class", "import"])
    def test_invalid_names_rejected(self, name, tmp_path):
        """Test that names which cannot become a class and module are rejected."""
        with pytest.raises(ValidationError):
            make_service(name, tmp_path)

        assert list(tmp_path.iterdir()) == []

    @pytest.mark.parametrize("name", ["café", "naïve_service", "服务", "mail.er", "mail/er"])
    def test_unmappable_characters_rejected(self, name, tmp_path):
        """Test that characters the name conversion cannot map are rejected, not dropped."""
        with pytest.raises(ValidationError, match="Invalid service name") as exc_info:
            make_service(name, tmp_path)

        assert exc_info.value.field == "name"
        assert exc_info.value.value == name

    @pytest.mark.parametrize("name,module,class_name", [
        ("none_service", "none_service.py", "NoneService"),
        ("class helper", "class_helper.py", "ClassHelper"),
        ("mailer2", "mailer_2.py", "Mailer2"),
    ])
    def test_names_containing_keywords_compile(self, name, module, class_name, tmp_path):
        """Test that keywords inside longer names still yield valid modules."""
        path = make_service(name, tmp_path)

        assert path.name == module
        namespace = {}
        exec(compile(path.read_text(encoding="utf-8"), str(path), "exec"), namespace)
        assert class_name in namespace
