"""Domain entities exposed by the application."""

from .company import SALARY_INCREASE_FACTOR, Company, increased_salary
from .employee import Employee

__all__ = ["Company", "Employee", "SALARY_INCREASE_FACTOR", "increased_salary"]
