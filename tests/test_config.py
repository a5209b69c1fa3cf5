import pytest

from app import create_app
from estimator.config import DEFAULT_MODEL, load_settings
from estimator.errors import ConfigurationError


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr("estimator.config.load_dotenv", lambda: None)
    for name in ("OPENAI_API_KEY", "API_KEY", "SECRET_KEY", "OPENAI_MODEL", "DEBUG_MODE"):
        monkeypatch.delenv(name, raising=False)


def test_missing_api_key_raises_configuration_error(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "secret")

    with pytest.raises(ConfigurationError):
        load_settings()


def test_missing_secret_key_raises_configuration_error(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "key")

    with pytest.raises(ConfigurationError):
        load_settings()


def test_create_app_fails_before_serving_without_credential(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "secret")

    with pytest.raises(ConfigurationError):
        create_app()


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("API_KEY", "legacy-key")
    monkeypatch.setenv("SECRET_KEY", "secret")
    monkeypatch.setenv("DEBUG_MODE", "true")

    settings = load_settings()

    assert settings.api_key == "legacy-key"
    assert settings.model == DEFAULT_MODEL
    assert settings.debug_mode is True
