"""Domain entity representing a company and its payroll."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from .employee import Employee

SALARY_INCREASE_FACTOR: Final[Decimal] = Decimal("1.1")
SALARY_QUANTUM: Final[Decimal] = Decimal("0.01")


@dataclass
class Company:
    """Core attributes describing a company."""

    id: int | None
    name: str
    last_salary_update: datetime | None
    employees: list[Employee] = field(default_factory=list)


def increased_salary(
    salary: Decimal, factor: Decimal = SALARY_INCREASE_FACTOR
) -> Decimal:
    """Return ``salary`` raised by ``factor``, rounded half-up to cents."""

    return (salary * factor).quantize(SALARY_QUANTUM, rounding=ROUND_HALF_UP)


__all__ = ["Company", "SALARY_INCREASE_FACTOR", "increased_salary"]
