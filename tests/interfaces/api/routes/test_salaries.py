"""Tests for the salary increase endpoints."""

from __future__ import annotations

from decimal import Decimal

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from main import create_app
from payroll_api.utils import now_in_app_naive_datetime

ENDPOINTS = ["/increase-salaries", "/increase-salaries-sql"]
CENT = Decimal("0.01")


@pytest.fixture()
def client():
    """Return a test client bound to a clean application instance."""

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.mark.parametrize("endpoint", ENDPOINTS)
def test_raises_every_salary_and_stamps_company(
    endpoint: str, client: TestClient, create_company, load_company
) -> None:
    company = create_company(["1000.00", "2500.00", "1234.50"])
    before = now_in_app_naive_datetime()

    response = client.put(endpoint, params={"companyId": company.id})

    assert response.status_code == 204
    assert response.content == b""

    updated = load_company(company.id)
    assert updated is not None
    assert updated.last_salary_update is not None
    assert updated.last_salary_update >= before
    for old, new in zip(company.employees, updated.employees):
        assert abs(new.salary - old.salary * Decimal("1.1")) <= CENT


@pytest.mark.parametrize("endpoint", ENDPOINTS)
def test_unknown_company_returns_not_found_without_writes(
    endpoint: str, client: TestClient, create_company, load_company, updated_rows
) -> None:
    other = create_company(["1000.00"])

    response = client.put(endpoint, params={"companyId": other.id + 1})

    assert response.status_code == 404
    assert response.json() == {
        "detail": f"The Company with Id '{other.id + 1}' was not found"
    }
    assert updated_rows == []
    untouched = load_company(other.id)
    assert untouched.last_salary_update is None
    assert untouched.employees[0].salary == Decimal("1000.00")


@pytest.mark.parametrize("endpoint", ENDPOINTS)
def test_company_id_is_required(endpoint: str, client: TestClient) -> None:
    assert client.put(endpoint).status_code == 422
    assert client.put(endpoint, params={"companyId": "abc"}).status_code == 422


def test_both_strategies_reach_the_same_state(
    client: TestClient, create_company, load_company
) -> None:
    salaries = ["1000.00", "2500.00", "1234.50", "820.40"]
    naive = create_company(salaries, name="Naive")
    bulk = create_company(salaries, name="Bulk")

    assert client.put("/increase-salaries", params={"companyId": naive.id}).status_code == 204
    assert client.put("/increase-salaries-sql", params={"companyId": bulk.id}).status_code == 204

    naive_salaries = [e.salary for e in load_company(naive.id).employees]
    bulk_salaries = [e.salary for e in load_company(bulk.id).employees]
    assert naive_salaries == bulk_salaries
    assert naive_salaries == [
        Decimal("1100.00"),
        Decimal("2750.00"),
        Decimal("1357.95"),
        Decimal("902.44"),
    ]


def test_naive_endpoint_updates_each_row(
    client: TestClient, create_company, updated_rows
) -> None:
    company = create_company(["1000.00"] * 5)

    client.put("/increase-salaries", params={"companyId": company.id})

    assert len(updated_rows) == 6
    assert sum("employees" in statement for statement in updated_rows) == 5
    assert sum("companies" in statement for statement in updated_rows) == 1


def test_sql_endpoint_issues_two_statements(
    client: TestClient, create_company, updated_rows
) -> None:
    company = create_company(["1000.00"] * 5)

    client.put("/increase-salaries-sql", params={"companyId": company.id})

    assert len(updated_rows) == 2
    assert "employees" in updated_rows[0]
    assert "companies" in updated_rows[1]


def test_other_companies_keep_their_salaries(
    client: TestClient, create_company, load_company
) -> None:
    target = create_company(["1000.00", "2000.00"], name="Target")
    bystander = create_company(["1000.00", "2000.00"], name="Bystander")

    client.put("/increase-salaries-sql", params={"companyId": target.id})
    client.put("/increase-salaries", params={"companyId": target.id})

    untouched = load_company(bystander.id)
    assert [e.salary for e in untouched.employees] == [
        Decimal("1000.00"),
        Decimal("2000.00"),
    ]
    assert untouched.last_salary_update is None
    assert [e.salary for e in load_company(target.id).employees] == [
        Decimal("1210.00"),
        Decimal("2420.00"),
    ]
