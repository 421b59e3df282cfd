"""Database URL helpers for Alembic migrations.

Extracted so they can be tested without triggering alembic.context at import time.
"""

from __future__ import annotations

import os
import re
from urllib.parse import quote_plus, urlparse, urlunparse

# key=value pairs; values may be single-quoted with backslash escapes.
_DSN_TOKEN = re.compile(r"(\w+)\s*=\s*('(?:[^'\\]|\\.)*'|\S*)")


def _parse_libpq_dsn(dsn: str) -> dict[str, str]:
    """Parse libpq key=value DSN, handling single-quoted values."""
    tokens: dict[str, str] = {}
    for key, value in _DSN_TOKEN.findall(dsn):
        if value.startswith("'"):
            value = re.sub(r"\\(.)", r"\1", value[1:-1])
        tokens[key] = value
    return tokens


def _libpq_dsn_to_url(dsn: str) -> str:
    """Convert a libpq key=value DSN to a SQLAlchemy URL.

    A host starting with "/" is a Unix socket directory and goes into the
    query string; otherwise host and port form the netloc.
    """
    tokens = _parse_libpq_dsn(dsn)
    password = tokens.get("password") or os.environ.get("DB_PASSWORD", "")

    credentials = f"{quote_plus(tokens.get('user', ''))}:{quote_plus(password)}"
    dbname = quote_plus(tokens.get("dbname", ""))
    host = tokens.get("host", "localhost")

    if host.startswith("/"):
        return f"postgresql+psycopg2://{credentials}@/{dbname}?host={quote_plus(host)}"

    port = tokens.get("port", "5432")
    return f"postgresql+psycopg2://{credentials}@{host}:{port}/{dbname}"


def _normalise_url(url: str) -> str:
    """Force the psycopg2 driver and inject DB_PASSWORD when the URL has none."""
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            url = "postgresql+psycopg2://" + url[len(prefix):]
            break

    db_password = os.environ.get("DB_PASSWORD", "")
    parsed = urlparse(url)
    if db_password and not parsed.password:
        netloc = f"{quote_plus(parsed.username or '')}:{quote_plus(db_password)}@{parsed.hostname}"
        if parsed.port:
            netloc += f":{parsed.port}"
        url = urlunparse(parsed._replace(netloc=netloc))
    return url


def _get_database_url() -> str:
    url = os.environ.get("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL is required to run migrations")
    if "://" in url:
        return _normalise_url(url)
    return _libpq_dsn_to_url(url)
