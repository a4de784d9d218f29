"""Persistence layer for companies and their employees."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Numeric, bindparam, text
from sqlalchemy.orm import Session, selectinload

from payroll_api.domain.entities import (
    SALARY_INCREASE_FACTOR,
    Company,
    Employee,
    increased_salary,
)
from payroll_api.infrastructure.models import CompanyModel, EmployeeModel

_BULK_SALARY_INCREASE = text(
    "UPDATE employees SET salary = salary * :factor WHERE company_id = :company_id"
).bindparams(bindparam("factor", type_=Numeric(18, 4)))


class CompanyRepository:
    """Provide read and salary update operations for companies."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, company_id: int) -> Company | None:
        model = self._get_model(company_id)
        return self._to_entity(model) if model else None

    def create(self, company: Company) -> Company:
        model = CompanyModel(
            name=company.name,
            last_salary_update=company.last_salary_update,
            employees=[
                EmployeeModel(name=employee.name, salary=employee.salary)
                for employee in company.employees
            ],
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def increase_salaries(
        self,
        company_id: int,
        *,
        updated_at: datetime,
        factor: Decimal = SALARY_INCREASE_FACTOR,
    ) -> Company | None:
        """Raise every salary through the unit of work, one row at a time.

        Every employee is loaded and mutated in memory; the flush emits one
        ``UPDATE`` per employee plus one for the company.
        """

        model = self._get_model(company_id)
        if model is None:
            return None

        for employee in model.employees:
            employee.salary = increased_salary(employee.salary, factor)
        model.last_salary_update = updated_at

        self.session.commit()
        return self._to_entity(model)

    def increase_salaries_with_sql(
        self,
        company_id: int,
        *,
        updated_at: datetime,
        factor: Decimal = SALARY_INCREASE_FACTOR,
    ) -> Company | None:
        """Raise every salary with a single set-based ``UPDATE``.

        The bulk statement and the company timestamp are written in one
        explicit transaction, so the session must not have one in progress.
        """

        with self.session.begin():
            model = self._get_model(company_id)
            if model is None:
                return None

            self.session.execute(
                _BULK_SALARY_INCREASE,
                {"factor": factor, "company_id": company_id},
            )
            model.last_salary_update = updated_at
            self.session.flush()

        return self._to_entity(model)

    def _get_model(self, company_id: int) -> CompanyModel | None:
        return self.session.get(
            CompanyModel,
            company_id,
            options=[selectinload(CompanyModel.employees)],
        )

    @staticmethod
    def _to_entity(model: CompanyModel) -> Company:
        return Company(
            id=model.id,
            name=model.name,
            last_salary_update=model.last_salary_update,
            employees=[
                Employee(
                    id=employee.id,
                    company_id=employee.company_id,
                    name=employee.name,
                    salary=employee.salary,
                )
                for employee in model.employees
            ],
        )


__all__ = ["CompanyRepository"]
