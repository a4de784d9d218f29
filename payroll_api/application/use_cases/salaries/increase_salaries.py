"""Use case for raising salaries employee by employee."""

import logging

from sqlalchemy.orm import Session

from payroll_api.domain.entities import Company
from payroll_api.infrastructure.repositories import CompanyRepository
from payroll_api.utils import now_in_app_naive_datetime
from .errors import company_not_found_message

logger = logging.getLogger(__name__)


def increase_salaries(session: Session, company_id: int) -> Company:
    """Raise every salary of ``company_id`` by loading and mutating each employee."""

    repository = CompanyRepository(session)
    company = repository.increase_salaries(
        company_id, updated_at=now_in_app_naive_datetime()
    )
    if company is None:
        logger.warning("Salary increase skipped: company %s not found", company_id)
        raise ValueError(company_not_found_message(company_id))

    logger.info(
        "Raised %s salaries of company %s one row at a time",
        len(company.employees),
        company_id,
    )
    return company


__all__ = ["increase_salaries"]
