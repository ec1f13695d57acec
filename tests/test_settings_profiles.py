from __future__ import annotations

from task_tracker.core.config import Settings


def test_environment_profiles_apply_defaults() -> None:
    dev = Settings(environment="development")
    assert dev.environment == "development"
    assert dev.log_level == "DEBUG"
    assert dev.reload is True

    test_profile = Settings(environment="test")
    assert test_profile.environment == "test"
    assert test_profile.log_level == "WARNING"
    assert test_profile.reload is False

    ci_profile = Settings(environment="ci")
    assert ci_profile.environment == "ci"
    assert ci_profile.log_level == "INFO"
    assert ci_profile.reload is False


def test_environment_aliases_are_normalised() -> None:
    assert Settings(environment="DEV").environment == "development"
    assert Settings(environment="testing").environment == "test"


def test_environment_profile_respects_explicit_overrides(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "error")
    overridden = Settings(environment="test")
    assert overridden.log_level == "ERROR"

    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setenv("RELOAD", "true")
    assert Settings(environment="test").reload is True


def test_cors_lists_accept_comma_separated_values() -> None:
    settings = Settings(cors_allow_origins="http://a.test, http://b.test ,")
    assert settings.cors_allow_origins == ["http://a.test", "http://b.test"]


def test_token_and_database_settings_read_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("MONGO_URI", "mongodb://db.internal:27017")
    monkeypatch.setenv("PORT", "8080")

    settings = Settings()

    assert settings.jwt_secret_key == "from-env"
    assert settings.jwt_algorithm == "HS256"
    assert settings.mongo_uri == "mongodb://db.internal:27017"
    assert settings.app_port == 8080
