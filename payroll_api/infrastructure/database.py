"""Database configuration and session management."""

from __future__ import annotations

from collections.abc import Generator, Sequence

import logging
import re
import urllib.parse

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from payroll_api.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)

_ODBC_DRIVER_PATTERN = re.compile(r"(?i)driver\s*=\s*(\{[^}]+\}|[^;]+)")


def _pick_best_sql_server_driver(installed: Sequence[str]) -> str | None:
    """Return the newest installed SQL Server ODBC driver."""

    if not installed:
        return None

    def driver_sort_key(name: str) -> tuple[int, str]:
        version_match = re.search(r"(\d+)", name)
        version = int(version_match.group(1)) if version_match else -1
        return (version, name)

    return sorted(installed, key=driver_sort_key)[-1]


def _ensure_sql_server_driver(
    raw_connection: str, installed_drivers: Sequence[str] | None = None
) -> str:
    """Ensure the ODBC driver referenced in the connection string exists locally."""

    driver_match = _ODBC_DRIVER_PATTERN.search(raw_connection)
    if not driver_match:
        return raw_connection

    driver_token = driver_match.group(1).strip()
    brace_wrapped = driver_token.startswith("{") and driver_token.endswith("}")
    driver_name = driver_token[1:-1] if brace_wrapped else driver_token

    if installed_drivers is None:
        try:  # pragma: no cover - pyodbc is an optional extra
            import pyodbc
        except ModuleNotFoundError:  # pragma: no cover - let the dialect report it
            return raw_connection
        installed_drivers = pyodbc.drivers()

    lookup = {d.lower() for d in installed_drivers}
    if driver_name.lower() in lookup:
        return raw_connection

    sql_server_drivers = [d for d in installed_drivers if "sql server" in d.lower()]
    replacement = _pick_best_sql_server_driver(sql_server_drivers)
    if replacement is None:
        raise RuntimeError(
            "The configured ODBC driver '%s' is not installed. Install it or update the connection string to use a "
            "driver that exists on this machine." % driver_name
        )

    logger.warning(
        "Configured ODBC driver '%s' is not installed. Falling back to '%s'.",
        driver_name,
        replacement,
    )

    replacement_token = f"{{{replacement}}}" if brace_wrapped else replacement
    return (
        raw_connection[: driver_match.start(1)]
        + replacement_token
        + raw_connection[driver_match.end(1) :]
    )


def is_odbc_connection_string(value: str) -> bool:
    """Return ``True`` when ``value`` is a raw ODBC string rather than a URL."""

    return "://" not in value and _ODBC_DRIVER_PATTERN.search(value) is not None


def build_sqlalchemy_database_url(
    settings: Settings, installed_drivers: Sequence[str] | None = None
) -> str:
    """Return the SQLAlchemy URL for the configured database.

    SQLAlchemy URLs are used as-is. A SQL Server ODBC connection string is
    wrapped into an ``mssql+pyodbc`` URL after checking its driver.
    """

    raw = settings.database_url.strip()
    if not is_odbc_connection_string(raw):
        return raw

    odbc_connection = _ensure_sql_server_driver(raw, installed_drivers)
    params = urllib.parse.quote_plus(odbc_connection)
    return f"mssql+pyodbc:///?odbc_connect={params}"


database_url = build_sqlalchemy_database_url(settings)
engine = create_engine(database_url, pool_pre_ping=True, echo=settings.sql_echo)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from payroll_api.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
