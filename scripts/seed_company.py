"""Utility script to create a company with a full payroll."""

from __future__ import annotations

import argparse
from decimal import Decimal, InvalidOperation

from sqlalchemy.exc import SQLAlchemyError

from payroll_api.domain.entities import Company, Employee
from payroll_api.infrastructure.database import SessionLocal, initialize_database
from payroll_api.infrastructure.repositories import CompanyRepository


def _salary(value: str) -> Decimal:
    try:
        salary = Decimal(value)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"invalid salary: {value!r}") from exc
    if salary < 0:
        raise argparse.ArgumentTypeError("salary must not be negative")
    return salary


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for company creation."""

    parser = argparse.ArgumentParser(
        description="Create a company with employees to exercise the salary endpoints.",
    )
    parser.add_argument(
        "--name",
        default="Acme",
        help="Company name (default: Acme)",
    )
    parser.add_argument(
        "--employees",
        type=int,
        default=1000,
        help="Number of employees to create (default: 1000)",
    )
    parser.add_argument(
        "--salary",
        type=_salary,
        default=Decimal("1000.00"),
        help="Starting salary for every employee (default: 1000.00)",
    )
    return parser.parse_args()


def main() -> None:
    """Create a company using the provided command line arguments."""

    args = parse_args()
    if args.employees < 0:
        raise SystemExit("The number of employees must not be negative.")

    initialize_database()

    company = Company(
        id=None,
        name=args.name,
        last_salary_update=None,
        employees=[
            Employee(id=None, company_id=None, name=f"Employee {index}", salary=args.salary)
            for index in range(1, args.employees + 1)
        ],
    )

    session = SessionLocal()
    try:
        created = CompanyRepository(session).create(company)
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not save the company: {exc}") from exc
    else:
        print(
            "Company created:\n"
            f"  ID: {created.id}\n"
            f"  Name: {created.name}\n"
            f"  Employees: {len(created.employees)}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
