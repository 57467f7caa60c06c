from profile_hub.core.config import Settings


def test_default_database_url_is_local_sqlite(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.DATABASE_URL == "sqlite:///./profile_hub.db"
    assert settings.API_PREFIX == "/api"
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 60 * 24 * 7


def test_cors_origins_parse_comma_list(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
    settings = Settings(_env_file=None)
    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_cors_origins_wildcard(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "*")
    assert Settings(_env_file=None).CORS_ORIGINS == ["*"]
