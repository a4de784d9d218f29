"""Aggregate application use cases."""

from .salaries import increase_salaries, increase_salaries_with_sql

__all__ = ["increase_salaries", "increase_salaries_with_sql"]
