from config import get_settings_module, load_settings


def test_settings_module_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "Production")
    assert get_settings_module() == "config.production"

    monkeypatch.setenv("APP_ENV", "test")
    assert get_settings_module() == "config.testing"

    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"


def test_unknown_env_falls_back_to_development():
    assert get_settings_module("staging") == "config.development"


def test_testing_settings():
    settings = load_settings("testing")

    assert settings.TESTING is True
    assert settings.PUNCH_DB_CONFIG == settings.DB_CONFIG
