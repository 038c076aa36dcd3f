"""
test_config.py: settings read from the environment.
"""

from aisc_shapes.config import DEFAULT_DATABASE_URL, Settings, get_settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.shapes_csv == "aisc-shapes-database-v16.0.csv"
    assert settings.csv_encoding == "utf-8-sig"
    assert settings.log_level == "INFO"
    assert settings.log_json is False
    assert settings.cors_origins == ()


def test_aisc_database_url_preferred():
    settings = Settings.from_env({
        "AISC_DATABASE_URL": "sqlite:///shapes.db",
        "DATABASE_URL": "postgresql://other/db",
    })
    assert settings.database_url == "sqlite:///shapes.db"


def test_database_url_fallback_normalised():
    settings = Settings.from_env({"DATABASE_URL": "postgres://user:pw@host:5432/shapes"})
    assert settings.database_url == "postgresql://user:pw@host:5432/shapes"


def test_flags_and_lists():
    settings = Settings.from_env({
        "LOG_JSON": "true",
        "LOG_LEVEL": "DEBUG",
        "CORS_ORIGINS": "https://a.example, https://b.example,,",
        "AISC_SHAPES_CSV": "/data/shapes.csv",
        "AISC_CSV_ENCODING": "latin-1",
    })
    assert settings.log_json is True
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ("https://a.example", "https://b.example")
    assert settings.shapes_csv == "/data/shapes.csv"
    assert settings.csv_encoding == "latin-1"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
