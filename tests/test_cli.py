"""Tests for the command line interface."""

from unittest.mock import patch

from click.testing import CliRunner

from staffdesk import __version__
from staffdesk.cli import cli


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


@patch("staffdesk.cli.uvicorn.run")
def test_serve_runs_app_factory(mock_run):
    result = CliRunner().invoke(cli, ["serve", "--port", "8123", "--log-level", "warning"])

    assert result.exit_code == 0
    args, kwargs = mock_run.call_args
    assert args == ("staffdesk.api.app:create_app",)
    assert kwargs["factory"] is True
    assert kwargs["port"] == 8123
    assert kwargs["log_level"] == "warning"


@patch("staffdesk.cli.uvicorn.run")
def test_serve_defaults_come_from_settings(mock_run):
    env = {"STAFFDESK_API_HOST": "127.0.0.1", "STAFFDESK_API_PORT": "8800", "STAFFDESK_API_RELOAD": "true"}

    from_env = CliRunner(env=env).invoke(cli, ["serve"])
    assert from_env.exit_code == 0, from_env.output
    env_kwargs = mock_run.call_args.kwargs
    assert (env_kwargs["host"], env_kwargs["port"], env_kwargs["reload"]) == ("127.0.0.1", 8800, True)

    overridden = CliRunner(env=env).invoke(cli, ["serve", "--port", "9000", "--no-reload"])
    assert overridden.exit_code == 0, overridden.output
    flag_kwargs = mock_run.call_args.kwargs
    assert (flag_kwargs["host"], flag_kwargs["port"], flag_kwargs["reload"]) == ("127.0.0.1", 9000, False)


def test_init_db_creates_tables(tmp_path):
    db_path = tmp_path / "staffdesk.db"

    result = CliRunner().invoke(cli, ["init-db", "--database-url", f"sqlite:///{db_path}"])

    assert result.exit_code == 0, result.output
    assert "Database schema created" in result.output
    assert db_path.exists()
