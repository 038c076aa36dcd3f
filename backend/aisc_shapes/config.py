"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_DATABASE_URL = "sqlite:///aisc_shapes.db"
DEFAULT_SHAPES_CSV = "aisc-shapes-database-v16.0.csv"


def _normalise_database_url(url: str) -> str:
    # SQLAlchemy no longer accepts the postgres:// scheme.
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    shapes_csv: str = DEFAULT_SHAPES_CSV
    csv_encoding: str = "utf-8-sig"
    log_level: str = "INFO"
    log_json: bool = False
    cors_origins: tuple[str, ...] = ()

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        url = env.get("AISC_DATABASE_URL") or env.get("DATABASE_URL") or DEFAULT_DATABASE_URL
        origins = tuple(
            origin.strip()
            for origin in env.get("CORS_ORIGINS", "").split(",")
            if origin.strip()
        )
        return cls(
            database_url=_normalise_database_url(url),
            shapes_csv=env.get("AISC_SHAPES_CSV") or DEFAULT_SHAPES_CSV,
            csv_encoding=env.get("AISC_CSV_ENCODING") or "utf-8-sig",
            log_level=env.get("LOG_LEVEL") or "INFO",
            log_json=_parse_bool(env.get("LOG_JSON", "")),
            cors_origins=origins,
        )


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read once."""
    return Settings.from_env()
