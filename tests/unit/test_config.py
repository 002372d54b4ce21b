"""Settings defaults and environment overrides."""

from notetaking.config import Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.algorithm == "HS256"
    assert settings.access_token_expire_minutes == 15
    assert settings.default_page_size == 20
    assert settings.max_page_size == 100
    assert settings.jwt_issuer == "notetaking-api"


def test_env_override(monkeypatch):
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "5")
    monkeypatch.setenv("TAG_CACHE_TTL_SECONDS", "60")
    settings = Settings(_env_file=None)
    assert settings.access_token_expire_minutes == 5
    assert settings.tag_cache_ttl_seconds == 60


def test_get_settings_is_shared():
    assert get_settings() is get_settings()
