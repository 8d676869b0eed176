"""
Environment-driven settings and logging setup.

Every value has a default so the service starts against a local Postgres
with no configuration at all.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def _sanitize_database_url(url: str) -> str:
    # asyncpg rejects libpq's sslmode query parameter.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if url:
        return _sanitize_database_url(url)

    user = _env_str("POSTGRES_USER", "postgres")
    password = _env_str("POSTGRES_PASSWORD", "password")
    host = _env_str("POSTGRES_HOST", "localhost")
    port = _env_int("POSTGRES_PORT", 5432)
    dbname = _env_str("APP_DB_NAME", "postgres")
    return f"postgresql://{quote(user, safe='')}:{quote(password, safe='')}@{host}:{port}/{dbname}"


def listen_address() -> tuple[str, int]:
    """
    `LISTENADDR` ("host:port" or ":port") sets both parts; `LISTEN_HOST`
    and `LISTEN_PORT` override them individually.
    """
    host, port = "0.0.0.0", 8010
    addr = os.environ.get("LISTENADDR", "").strip()
    if addr:
        raw_host, _, raw_port = addr.rpartition(":")
        host = raw_host or host
        try:
            port = int(raw_port)
        except ValueError:
            pass
    return _env_str("LISTEN_HOST", host), _env_int("LISTEN_PORT", port)


@dataclass(frozen=True)
class Settings:
    database_url: str
    pool_min_size: int = 1
    pool_max_size: int = 5
    command_timeout: int = 30
    listen_host: str = "0.0.0.0"
    listen_port: int = 8010
    drop_tables_on_shutdown: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        host, port = listen_address()
        return cls(
            database_url=database_url(),
            pool_min_size=_env_int("DB_POOL_MIN_SIZE", 1),
            pool_max_size=_env_int("DB_POOL_MAX_SIZE", 5),
            command_timeout=_env_int("DB_COMMAND_TIMEOUT", 30),
            listen_host=host,
            listen_port=port,
            drop_tables_on_shutdown=_env_bool("DROP_TABLES_ON_SHUTDOWN", False),
            log_level=_env_str("LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    resolved = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger().setLevel(resolved)
