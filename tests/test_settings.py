import pytest
from pydantic import ValidationError

from config.settings import Settings


def test_mongo_uri_and_port_from_env(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://db.example:27017/tracker")
    monkeypatch.setenv("PORT", "8080")
    loaded = Settings(_env_file=None)
    assert loaded.mongodb_url == "mongodb://db.example:27017/tracker"
    assert loaded.port == 8080


def test_defaults(monkeypatch):
    for name in ("MONGO_URI", "MONGODB_URL", "PORT", "DISPLAY_UTC_OFFSET_HOURS"):
        monkeypatch.delenv(name, raising=False)
    loaded = Settings(_env_file=None)
    assert loaded.mongodb_url.startswith("mongodb://localhost")
    assert loaded.port == 3000
    assert loaded.display_utc_offset_hours == 0


def test_display_offset_must_be_under_a_day():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, display_utc_offset_hours=24)
    with pytest.raises(ValidationError):
        Settings(_env_file=None, display_utc_offset_hours=-24)
    assert Settings(_env_file=None, display_utc_offset_hours=-12).display_utc_offset_hours == -12
