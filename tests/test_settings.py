from __future__ import annotations

import pytest

from gqlrace import (
    ClientSettings,
    ConfigurationError,
    GraphQLClient,
    RacePolicy,
    UrllibTransport,
    create_client,
)


class _NullTransport:
    async def post_form(self, url, fields):
        raise AssertionError("unused")


def test_settings_defaults():
    settings = ClientSettings()

    assert settings.race_policy() == RacePolicy(fan_out=3, success_status=200)
    assert settings.timeout_s == 30.0


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("GQLRACE_ENDPOINT", "https://api.example.test/graphql")
    monkeypatch.setenv("GQLRACE_FAN_OUT", "5")
    monkeypatch.setenv("GQLRACE_TIMEOUT_S", "2.5")
    monkeypatch.setenv("GQLRACE_SUCCESS_STATUS", "201")
    monkeypatch.setenv("GQLRACE_PREFER_SUCCESS", "true")

    settings = ClientSettings.from_env()

    assert settings == ClientSettings(
        endpoint="https://api.example.test/graphql",
        fan_out=5,
        timeout_s=2.5,
        success_status=201,
        prefer_success=True,
    )


def test_settings_from_env_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "GQLRACE_ENDPOINT",
        "GQLRACE_FAN_OUT",
        "GQLRACE_TIMEOUT_S",
        "GQLRACE_SUCCESS_STATUS",
        "GQLRACE_PREFER_SUCCESS",
    ):
        monkeypatch.delenv(name, raising=False)

    assert ClientSettings.from_env() == ClientSettings()


def test_settings_from_env_rejects_bad_numbers(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("GQLRACE_FAN_OUT", "three")

    with pytest.raises(ConfigurationError):
        ClientSettings.from_env()


@pytest.mark.parametrize(
    "kwargs",
    [{"fan_out": 0}, {"timeout_s": 0}, {"success_status": 1000}],
)
def test_settings_validation(kwargs):
    with pytest.raises(ConfigurationError):
        ClientSettings(**kwargs)


def test_create_client_uses_default_transport():
    client = create_client(
        "http://localhost:4000/graphql",
        settings=ClientSettings(timeout_s=3.0, fan_out=2),
        headers={"Authorization": "Bearer t"},
    )

    assert isinstance(client, GraphQLClient)
    assert isinstance(client.transport, UrllibTransport)
    assert client.transport.timeout_s == 3.0
    assert client.transport.headers == {"Authorization": "Bearer t"}
    assert client.race_policy.fan_out == 2


def test_create_client_reads_endpoint_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("GQLRACE_ENDPOINT", "https://api.example.test/graphql")
    transport = _NullTransport()

    client = create_client(transport=transport)

    assert client.endpoint == "https://api.example.test/graphql"
    assert client.transport is transport


@pytest.mark.parametrize("endpoint", ["", "ftp://example.test/graphql"])
def test_create_client_rejects_bad_endpoint(endpoint):
    with pytest.raises(ConfigurationError):
        create_client(endpoint, settings=ClientSettings())


def test_create_client_rejects_headers_with_custom_transport():
    with pytest.raises(ConfigurationError):
        create_client(
            "http://localhost/graphql",
            settings=ClientSettings(),
            transport=_NullTransport(),
            headers={"X": "1"},
        )
