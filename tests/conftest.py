"""Shared fixtures backed by a throwaway SQLite database."""

from __future__ import annotations

import os
import sys
import tempfile
from decimal import Decimal
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "payroll_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ.pop("APP_TIMEZONE", None)
os.environ.pop("SQL_ECHO", None)

from payroll_api.config import get_settings  # noqa: E402

get_settings.cache_clear()

from sqlalchemy import event  # noqa: E402

from payroll_api.domain.entities import Company, Employee  # noqa: E402
from payroll_api.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from payroll_api.infrastructure.repositories import CompanyRepository  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def create_company():
    """Return a helper inserting a company whose employees earn ``salaries``."""

    def _create(salaries: list[str], name: str = "Acme") -> Company:
        company = Company(
            id=None,
            name=name,
            last_salary_update=None,
            employees=[
                Employee(
                    id=None,
                    company_id=None,
                    name=f"Employee {index}",
                    salary=Decimal(salary),
                )
                for index, salary in enumerate(salaries, start=1)
            ],
        )
        with SessionLocal() as session:
            return CompanyRepository(session).create(company)

    return _create


@pytest.fixture()
def load_company():
    """Return a helper reading a company back through a fresh session."""

    def _load(company_id: int) -> Company | None:
        with SessionLocal() as session:
            return CompanyRepository(session).get(company_id)

    return _load


@pytest.fixture()
def updated_rows():
    """Record one entry per row targeted by each ``UPDATE`` sent to the database."""

    statements: list[str] = []

    def _record(conn, cursor, statement, parameters, context, executemany):
        if not statement.lstrip().upper().startswith("UPDATE"):
            return
        rows = len(parameters) if executemany else 1
        statements.extend([statement] * rows)

    event.listen(engine, "before_cursor_execute", _record)
    yield statements
    event.remove(engine, "before_cursor_execute", _record)
