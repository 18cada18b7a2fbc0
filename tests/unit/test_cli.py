"""
Unit tests for the command line interface.
"""
import pytest

from plugboard.cli import main as cli


class TestCLI:
    """Test cases for the plugboard command."""

    @pytest.mark.parametrize("argv,expected", [
        (["turn-on"], "Fan is spinning!"),
        (["turn-on", "--device", "light"], "Light is shining!"),
        (["turn-on", "--device", "tv"], "TV is playing!"),
        (["turn-on", "--device", "unknown"], "Fan is spinning!"),
    ])
    def test_turn_on(self, argv, expected, capsys):
        """Test turning devices on from the command line."""
        assert cli.main(argv) == 0

        assert capsys.readouterr().out.strip().splitlines()[-1] == expected

    def test_make_service(self, tmp_path, capsys):
        """Test scaffolding a service."""
        assert cli.main(["make-service", "mailer", "--directory", str(tmp_path)]) == 0

        assert (tmp_path / "mailer.py").exists()
        assert "Service created:" in capsys.readouterr().out

    def test_make_service_twice_fails(self, tmp_path, capsys):
        """Test that a duplicate service exits with an error."""
        cli.main(["make-service", "mailer", "--directory", str(tmp_path)])

        assert cli.main(["make-service", "mailer", "--directory", str(tmp_path)]) == 1
        assert "Service Mailer already exists!" in capsys.readouterr().err

    def test_make_service_keyword_name_fails(self, tmp_path, capsys):
        """Test that a keyword name is refused without writing a module."""
        assert cli.main(["make-service", "false", "--directory", str(tmp_path)]) == 1

        assert "Invalid service name" in capsys.readouterr().err
        assert not (tmp_path / "false.py").exists()

    def test_serve_runs_uvicorn(self, monkeypatch):
        """Test that serve hands the application to uvicorn."""
        calls = []
        monkeypatch.setattr(cli, "run_serve", lambda host, port, reload: calls.append((host, port, reload)))

        assert cli.main(["serve", "--host", "127.0.0.1", "--port", "9000"]) == 0
        assert calls == [("127.0.0.1", 9000, False)]

    def test_command_required(self):
        """Test that a sub-command must be given."""
        with pytest.raises(SystemExit):
            cli.main([])
