import pytest

from config import Settings


def test_defaults(monkeypatch):
    for key in ("LOG_LEVEL", "APP_TITLE", "SEED_SAMPLE_DATA"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("config.load_dotenv", lambda: False)
    settings = Settings()
    assert settings.log_level == "INFO"
    assert settings.app_title == "Subscription Manager"
    assert settings.seed_sample_data is True


def test_overrides(monkeypatch):
    monkeypatch.setattr("config.load_dotenv", lambda: False)
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("SEED_SAMPLE_DATA", "no")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.seed_sample_data is False


def test_bad_boolean(monkeypatch):
    monkeypatch.setattr("config.load_dotenv", lambda: False)
    monkeypatch.setenv("SEED_SAMPLE_DATA", "maybe")
    with pytest.raises(RuntimeError):
        Settings()
