"""Tests for the click command tree."""

import json

import pytest
from click.testing import CliRunner

from inwx_client import INWXClient
from inwx_cli import main as cli_main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fake(monkeypatch, connection):
    """Route every INWXClient built by the CLI through one FakeConnection."""
    built = []

    def factory(**kwargs):
        built.append(kwargs)
        return INWXClient(connection=connection, **kwargs)

    for name in ("INWX_USERNAME", "INWX_PASSWORD", "INWX_SANDBOX", "INWX_LOG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("inwx_cli.config.DEFAULT_CONFIG_PATHS", [])
    monkeypatch.setattr(cli_main, "INWXClient", factory)

    connection.built = built
    return connection


BASE = ["-u", "testuser", "-P", "testpass"]


def test_domain_check_json(runner, fake):
    fake.queue({"customerId": 1})
    fake.queue({"domain": [{"domain": "foobar.com", "avail": 1, "status": "FREE", "price": 9.9}]})

    result = runner.invoke(cli_main.cli, BASE + ["-f", "json", "domain", "check", "foobar.com"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data[0]["domain"] == "foobar.com"
    assert data[0]["available"] == 1
    assert [m for m, _ in fake.calls] == ["account.login", "domain.check", "account.logout"]


def test_domain_check_table(runner, fake):
    fake.queue({"customerId": 1})
    fake.queue({"domain": [{"domain": "foobar.com", "avail": 0, "status": "REGISTERED"}]})

    result = runner.invoke(cli_main.cli, BASE + ["domain", "check", "foobar.com"])

    assert result.exit_code == 0, result.output
    assert "DOMAIN" in result.output
    assert "REGISTERED" in result.output


def test_sandbox_flag(runner, fake):
    result = runner.invoke(cli_main.cli, BASE + ["--sandbox", "--timeout", "5", "account", "info"])

    assert result.exit_code == 0, result.output
    assert fake.built[0]["sandbox"] is True
    assert fake.built[0]["timeout"] == 5


def test_command_error_exits_nonzero(runner, fake):
    fake.queue({"customerId": 1})
    fake.queue(code=2303, message="Object does not exist")

    result = runner.invoke(cli_main.cli, BASE + ["domain", "info", "missing.com"])

    assert result.exit_code == 1
    assert "Not found: missing.com" in result.output
    assert fake.last_method == "account.logout"


def test_reason_shown(runner, fake):
    fake.queue({"customerId": 1})
    fake.queue(code=2400, message="Command failed", reason_code="TTL", reason="TTL too low")

    result = runner.invoke(cli_main.cli, BASE + [
        "nameserver", "record-create", "example.com", "--type", "A", "--content", "192.0.2.1", "--ttl", "1",
    ])

    assert result.exit_code == 1
    assert "(2400) Command failed. Reason: (TTL) TTL too low" in result.output


def test_login_failure(runner, fake):
    fake.queue(code=2200, message="Authentication error")

    result = runner.invoke(cli_main.cli, BASE + ["account", "info"])

    assert result.exit_code == 1
    assert "Authentication failed" in result.output
    assert [m for m, _ in fake.calls] == ["account.login"]


def test_missing_username(runner, fake):
    result = runner.invoke(cli_main.cli, ["domain", "check", "foobar.com"])
    assert result.exit_code == 1
    assert "No username" in result.output
    assert fake.calls == []


def test_tfa_unlock(runner, fake):
    fake.queue({"customerId": 1, "tfa": "GOOGLE-AUTH"})

    result = runner.invoke(cli_main.cli, BASE + ["--tan", "123456", "account", "info"])

    assert result.exit_code == 0, result.output
    assert fake.calls[1] == ("account.unlock", {"tan": "123456", "lang": "eng"})


def test_failed_unlock_logs_out(runner, fake):
    fake.queue({"customerId": 1, "tfa": "GOOGLE-AUTH"})
    fake.queue(code=2200, message="Authentication error")

    result = runner.invoke(cli_main.cli, BASE + ["--tan", "000000", "account", "info"])

    assert result.exit_code == 1
    assert "Authentication failed" in result.output
    assert [m for m, _ in fake.calls] == ["account.login", "account.unlock", "account.logout"]
    assert fake.closed


def test_record_create(runner, fake):
    fake.queue({"customerId": 1})
    fake.queue({"id": 4711})

    result = runner.invoke(cli_main.cli, BASE + [
        "nameserver", "record-create", "example.com",
        "--type", "MX", "--content", "mail.example.com", "--name", "example.com", "--prio", "10",
    ])

    assert result.exit_code == 0, result.output
    assert "Record created: 4711" in result.output
    assert fake.calls[1] == ("nameserver.createRecord", {
        "domain": "example.com",
        "type": "MX",
        "content": "mail.example.com",
        "name": "example.com",
        "prio": 10,
        "lang": "eng",
    })


def test_record_update(runner, fake):
    result = runner.invoke(cli_main.cli, BASE + [
        "nameserver", "record-update", "4711", "--type", "A", "--content", "192.0.2.9",
    ])

    assert result.exit_code == 0, result.output
    assert fake.calls[1] == ("nameserver.updateRecord", {
        "id": 4711, "type": "A", "content": "192.0.2.9", "lang": "eng",
    })


def test_domain_delete_with_date(runner, fake):
    result = runner.invoke(cli_main.cli, BASE + ["domain", "delete", "example.com", "--date", "2024-01-15", "-y"])

    assert result.exit_code == 0, result.output
    assert fake.calls[1] == ("domain.delete", {
        "domain": "example.com", "scDate": "2024-01-15T00:00:00Z", "lang": "eng",
    })


def test_domain_delete_aborted(runner, fake):
    result = runner.invoke(cli_main.cli, BASE + ["domain", "delete", "example.com"], input="n\n")
    assert result.exit_code == 0
    assert fake.calls == []


def test_contact_update_only_given_options(runner, fake):
    result = runner.invoke(cli_main.cli, BASE + ["contact", "update", "99", "--email", "new@example.com"])

    assert result.exit_code == 0, result.output
    assert fake.calls[1] == ("contact.update", {"id": 99, "email": "new@example.com", "lang": "eng"})


def test_config_show_masks_password(runner, fake):
    result = runner.invoke(cli_main.cli, BASE + ["config", "show"])

    assert result.exit_code == 0, result.output
    assert "testuser" in result.output
    assert "testpass" not in result.output
    assert "********" in result.output
    assert fake.calls == []


def test_config_init(runner, fake, tmp_path):
    path = tmp_path / "inwx" / "config.yaml"

    result = runner.invoke(cli_main.cli, ["config", "init", "--path", str(path)])

    assert result.exit_code == 0, result.output
    assert path.exists()
    assert "credentials:" in path.read_text()


def test_config_file_used(runner, fake, tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("credentials:\n  username: fileuser\n  password: filepass\napi:\n  sandbox: true\n")

    result = runner.invoke(cli_main.cli, ["-c", str(path), "account", "info"])

    assert result.exit_code == 0, result.output
    assert fake.built[0]["username"] == "fileuser"
    assert fake.built[0]["sandbox"] is True
