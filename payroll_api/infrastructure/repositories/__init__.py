"""Repository implementations for infrastructure layer."""

from .company_repository import CompanyRepository

__all__ = ["CompanyRepository"]
