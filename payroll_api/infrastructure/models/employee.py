"""SQLAlchemy model for employees."""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from payroll_api.infrastructure.database import Base


class EmployeeModel(Base):
    """Database representation of an employee."""

    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(
        Integer,
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(100), nullable=False)
    salary = Column(Numeric(18, 2), nullable=False)

    company = relationship("CompanyModel", back_populates="employees")


__all__ = ["EmployeeModel"]
