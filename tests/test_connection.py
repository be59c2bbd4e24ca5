import logging

import pytest

from helix_hub.database import build_connection_string, parse_connection_string
from helix_hub.exceptions import ConfigurationError


def test_build_connection_string():
    connection_string = build_connection_string(
        server="helix.database.windows.net",
        database="helix-project-data",
        user="helix",
        password="secret",
        connect_timeout=30,
    )

    assert connection_string == (
        "Server=helix.database.windows.net;Database=helix-project-data;"
        "User ID=helix;Password=secret;Encrypt=true;"
        "TrustServerCertificate=false;Connect Timeout=30;"
    )


def test_parse_connection_string():
    config = parse_connection_string(
        "Server=helix.database.windows.net;Database=helix-core-data;User ID=helix;"
        "Password=secret;Encrypt=true;TrustServerCertificate=false;Connect Timeout=15;"
    )

    assert config.server == "helix.database.windows.net"
    assert config.database == "helix-core-data"
    assert config.user == "helix"
    assert config.password.get_secret_value() == "secret"
    assert config.encrypt is True
    assert config.trust_server_certificate is False
    assert config.connect_timeout == 15


def test_password_may_contain_equals_sign():
    config = parse_connection_string("Server=db;Password=abc=def==;")

    assert config.password.get_secret_value() == "abc=def=="


def test_unknown_and_malformed_parts_are_skipped(caplog):
    with caplog.at_level(logging.WARNING):
        config = parse_connection_string("Server=db;Application Name=hub;garbage;;")

    assert config.server == "db"
    assert "Unknown connection string key encountered: 'Application Name'" in caplog.text
    assert "Invalid connection string part encountered: 'garbage'" in caplog.text


def test_invalid_timeout_is_ignored(caplog):
    with caplog.at_level(logging.WARNING):
        config = parse_connection_string("Server=db;Connect Timeout=soon;")

    assert config.connect_timeout is None
    assert "Invalid Connect Timeout value" in caplog.text


def test_password_is_masked_in_logs(caplog):
    with caplog.at_level(logging.DEBUG):
        parse_connection_string("Server=db;Password=hunter2;")

    assert "hunter2" not in caplog.text


def test_connect_kwargs_encryption():
    encrypted = parse_connection_string("Server=db;User ID=u;Password=p;Encrypt=true;")
    trusted = parse_connection_string(
        "Server=db;Encrypt=true;TrustServerCertificate=true;"
    )
    plain = parse_connection_string("Server=db;Encrypt=false;Connect Timeout=5;")

    assert encrypted.to_connect_kwargs() == {
        "server": "db",
        "user": "u",
        "password": "p",
        "encryption": "require",
    }
    assert trusted.to_connect_kwargs()["encryption"] == "request"
    assert plain.to_connect_kwargs()["encryption"] == "off"
    assert plain.to_connect_kwargs()["login_timeout"] == 5


def test_missing_server_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        parse_connection_string("Database=helix-core-data;User ID=helix;")
