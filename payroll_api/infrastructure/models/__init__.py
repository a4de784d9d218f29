"""ORM models used by the application infrastructure."""

from .company import CompanyModel
from .employee import EmployeeModel

__all__ = ["CompanyModel", "EmployeeModel"]
