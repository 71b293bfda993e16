"""Settings loading and validation."""

import pytest

from restfacade import DEFAULT_SETTINGS, Request, Settings, load_settings, validate_settings


def test_defaults() -> None:
    assert DEFAULT_SETTINGS.environment == "dev"
    assert DEFAULT_SETTINGS.base_url_scheme == "https"
    assert DEFAULT_SETTINGS.charset == "utf-8"
    validate_settings(DEFAULT_SETTINGS)


def test_load_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("RESTFACADE_ENV", "PROD")
    monkeypatch.setenv("RESTFACADE_BASE_URL_SCHEME", "HTTP")
    monkeypatch.setenv("RESTFACADE_CHARSET", "latin-1")
    monkeypatch.setenv("RESTFACADE_CORRELATION_HEADER", "X-Request-Id")
    settings = load_settings()
    assert settings == Settings(
        environment="prod",
        debug=False,
        base_url_scheme="http",
        charset="latin-1",
        correlation_header="X-Request-Id",
    )


def test_request_uses_loaded_settings(monkeypatch) -> None:
    monkeypatch.setenv("RESTFACADE_CHARSET", "latin-1")
    req = Request("GET", "/foo?name=caf%E9", [("Host", "h")], settings=load_settings())
    assert req.get_header("name") == "café"
    assert req.get_url() == "https://h/foo?name=caf%E9"


@pytest.mark.parametrize(
    "env, message",
    [
        ({"RESTFACADE_ENV": "staging"}, "Unsupported environment"),
        ({"RESTFACADE_ENV": "prod", "RESTFACADE_DEBUG": "true"}, "Debug must be disabled"),
        ({"RESTFACADE_BASE_URL_SCHEME": "ftp"}, "Unsupported URL scheme"),
        ({"RESTFACADE_CHARSET": "no-such-charset"}, "Unknown charset"),
        ({"RESTFACADE_CORRELATION_HEADER": ""}, "Correlation header"),
    ],
)
def test_invalid_settings(monkeypatch, env, message) -> None:
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    with pytest.raises(ValueError, match=message):
        load_settings()
