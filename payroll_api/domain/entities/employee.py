"""Domain entity representing an employee."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Employee:
    """Core attributes describing an employee on a company payroll."""

    id: int | None
    company_id: int | None
    name: str
    salary: Decimal


__all__ = ["Employee"]
