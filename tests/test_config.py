from trend_story.config import Settings


def test_defaults_allow_any_origin():
    settings = Settings(_env_file=None)

    assert settings.allowed_origins == ["*"]
    assert settings.allowed_methods == ["GET", "POST", "DELETE"]
    assert settings.allowed_headers == ["content-type"]


def test_comma_separated_lists_from_environment(monkeypatch):
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("ALLOWED_METHODS", "GET, POST")
    monkeypatch.setenv("ALLOWED_HEADERS", "content-type,x-request-id")

    settings = Settings(_env_file=None)

    assert settings.allowed_origins == ["https://a.example", "https://b.example"]
    assert settings.allowed_methods == ["GET", "POST"]
    assert settings.allowed_headers == ["content-type", "x-request-id"]


def test_allowed_origins_alias(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://localhost:3000")

    assert Settings(_env_file=None).allowed_origins == ["http://localhost:3000"]


def test_sync_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SYNC_ENABLED", "false")
    monkeypatch.setenv("SYNC_INTERVAL_MINUTES", "5")

    settings = Settings(_env_file=None)

    assert settings.sync_enabled is False
    assert settings.sync_interval_minutes == 5
