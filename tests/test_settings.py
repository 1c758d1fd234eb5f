import pytest

from seletor import settings


@pytest.fixture(autouse=True)
def _clear_cache():
    for getter in (settings.get_api_port, settings.get_api_bind_host, settings.get_log_level):
        getter.cache_clear()
    yield
    for getter in (settings.get_api_port, settings.get_api_bind_host, settings.get_log_level):
        getter.cache_clear()


def test_defaults(monkeypatch) -> None:
    for name in ("SELETOR_API_PORT", "PORT", "SELETOR_API_BIND_HOST", "SELETOR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    assert settings.get_api_port() == 8000
    assert settings.get_api_bind_host() == "0.0.0.0"
    assert settings.get_log_level() == "INFO"


def test_port_falls_back_to_generic_variable(monkeypatch) -> None:
    monkeypatch.delenv("SELETOR_API_PORT", raising=False)
    monkeypatch.setenv("PORT", "9100")

    assert settings.get_api_port() == 9100


def test_log_level_is_upper_cased(monkeypatch) -> None:
    monkeypatch.setenv("SELETOR_LOG_LEVEL", "debug")

    assert settings.get_log_level() == "DEBUG"
