from pathlib import Path

from app.settings import Settings, choose_env_file


def test_content_path_is_a_path():
    s = Settings(CONTENT_DIR="site/content/posts")
    assert s.content_path == Path("site/content/posts")


def test_defaults():
    s = Settings()
    assert s.DEFAULT_PER_PAGE == 10
    assert s.MAX_PER_PAGE == 100
    assert s.HEADING_ANCHOR_MAX_LEVEL == 6


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("CONTENT_DIR", "/srv/posts")
    monkeypatch.setenv("DEFAULT_PER_PAGE", "25")
    s = Settings()
    assert s.content_path == Path("/srv/posts")
    assert s.DEFAULT_PER_PAGE == 25


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
