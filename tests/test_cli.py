"""CLI behavior tests."""

import json

import pytest

import dstlist.services.dst_service as dst_service_mod
from dstlist import cli
from dstlist.config.loader import ACCESS_KEY_ENV, SECRET_KEY_ENV

from conftest import ERROR_XML, FakeTransport


@pytest.fixture
def transport(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(ACCESS_KEY_ENV, "cli-access")
    monkeypatch.setenv(SECRET_KEY_ENV, "cli-secret")
    fake = FakeTransport()
    monkeypatch.setattr(dst_service_mod, "_default_transport", lambda _settings: fake)
    return fake


def test_list_text_output(transport, capsys):
    """Test that the list command prints a text table."""
    exit_code = cli.main(["list", "--country", "no", "--year", "2014"])

    out = capsys.readouterr().out
    assert exit_code == cli.EXIT_OK
    assert "Norway" in out
    assert "Japan" in out
    assert "country=no" in transport.urls[0]
    assert "year=2014" in transport.urls[0]


def test_list_json_output(transport, capsys):
    """Test that the list command prints JSON and passes toggle flags."""
    exit_code = cli.main(["list", "--format", "json", "--time-changes", "--no-places"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == cli.EXIT_OK
    assert [entry["region"]["country"]["id"] for entry in payload] == ["no", "jp", "us"]
    assert payload[1]["dst_start"] is None
    assert "timechanges=1" in transport.urls[0]
    assert "listplaces=0" in transport.urls[0]


def test_all_countries_flag_disables_onlydst(transport):
    """Test that --all-countries sends onlydst=0."""
    cli.main(["list", "--all-countries"])

    assert "onlydst=0" in transport.urls[0]


def test_invalid_year_exits_with_argument_error(transport, capsys):
    """Test that an invalid year exits with status 2 and no request."""
    exit_code = cli.main(["list", "--year", "0"])

    assert exit_code == cli.EXIT_INVALID_ARGUMENT
    assert "Error" in capsys.readouterr().err
    assert transport.urls == []


def test_service_error_exits_with_failure(transport, capsys):
    """Test that a service error exits with status 1."""
    transport.payload = ERROR_XML

    exit_code = cli.main(["list"])

    assert exit_code == cli.EXIT_FAILURE
    assert "Invalid access key" in capsys.readouterr().err


def test_missing_credentials_exit_with_failure(transport, monkeypatch, capsys):
    """Test that missing credentials exit with status 1 and no request."""
    monkeypatch.delenv(ACCESS_KEY_ENV)

    exit_code = cli.main(["list"])

    assert exit_code == cli.EXIT_FAILURE
    assert "access_key" in capsys.readouterr().err
    assert transport.urls == []


def test_explicit_missing_config_file_is_an_error(transport, tmp_path, capsys):
    """Test that an explicit --config path must exist."""
    exit_code = cli.main(["list", "--config", str(tmp_path / "missing.yaml")])

    assert exit_code == cli.EXIT_FAILURE
    assert "Config file not found" in capsys.readouterr().err
