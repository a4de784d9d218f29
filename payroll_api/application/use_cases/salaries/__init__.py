"""Use cases for raising a company's salaries."""

from .increase_salaries import increase_salaries
from .increase_salaries_with_sql import increase_salaries_with_sql
from .errors import company_not_found_message

__all__ = [
    "company_not_found_message",
    "increase_salaries",
    "increase_salaries_with_sql",
]
