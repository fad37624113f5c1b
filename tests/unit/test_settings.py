import pytest

from storefront.settings import Settings


@pytest.mark.unit
def test_settings_to_flask_config_exposes_runtime_values(monkeypatch) -> None:
    monkeypatch.setenv("APP_NAME", "Shop")
    monkeypatch.setenv("ENABLE_DEBUG_LOG", "true")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Settings.load().to_flask_config()

    assert config["APP_NAME"] == "Shop"
    assert config["ENABLE_DEBUG_LOG"] is True
    assert config["LOG_LEVEL"] == "DEBUG"
    assert config["SECRET_KEY"] == "test-secret-key"


@pytest.mark.unit
def test_settings_generates_secret_key_outside_production(monkeypatch) -> None:
    monkeypatch.delenv("SECRET_KEY", raising=False)

    settings = Settings.load()

    assert settings.secret_key
    assert settings.debug is True


@pytest.mark.unit
def test_settings_requires_secret_key_in_production(monkeypatch) -> None:
    monkeypatch.setenv("FLASK_ENV", "production")
    monkeypatch.delenv("SECRET_KEY", raising=False)

    with pytest.raises(ValueError, match="SECRET_KEY"):
        Settings.load()


@pytest.mark.unit
def test_settings_rejects_unknown_log_level(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings.load()


@pytest.mark.unit
def test_settings_blank_login_view_disables_redirect(monkeypatch) -> None:
    monkeypatch.setenv("LOGIN_VIEW", "   ")

    assert Settings.load().login_view is None
