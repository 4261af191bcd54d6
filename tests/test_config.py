"""Tests for settings loading."""
from config import Settings


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("RANKING_LIMIT", "5")
    monkeypatch.setenv("SESSION_COOKIE_NAME", "issues_session")

    settings = Settings(_env_file=None)

    assert settings.RANKING_LIMIT == 5
    assert settings.SESSION_COOKIE_NAME == "issues_session"
    assert settings.COMMENTER_CACHE_TTL_SECONDS == 1800


def test_unknown_settings_are_ignored(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("DEFAULT_LANGUAGE=en\nSOME_OTHER_SERVICE_KEY=x\n", encoding="utf-8")

    settings = Settings(_env_file=env_file)

    assert settings.DEFAULT_LANGUAGE == "en"
    assert not hasattr(settings, "SOME_OTHER_SERVICE_KEY")
