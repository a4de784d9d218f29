"""SQLAlchemy model for companies."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from payroll_api.infrastructure.database import Base


class CompanyModel(Base):
    """Database representation of a company."""

    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    last_salary_update = Column(DateTime, nullable=True)

    employees = relationship(
        "EmployeeModel",
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="EmployeeModel.id",
    )


__all__ = ["CompanyModel"]
