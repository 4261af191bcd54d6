"""
Organization Models

Departments and the employees that belong to them.
"""
from typing import Optional, List

from sqlalchemy import String, Integer, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, LabelMixin


class Department(Base, LabelMixin):
    """A factory department."""
    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    employees: Mapped[List["Employee"]] = relationship(
        "Employee",
        back_populates="department"
    )


class Employee(Base, TimestampMixin):
    """
    An employee.

    Employees report issues (as assignee), resolve them (as solver)
    and comment on them.
    """
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    employee_id: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    # Names
    korean_name: Mapped[str] = mapped_column(String(100), nullable=False)
    thai_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    nickname: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    department_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("departments.id", ondelete="SET NULL"),
        nullable=True
    )

    department: Mapped[Optional["Department"]] = relationship(
        "Department",
        back_populates="employees"
    )

    __table_args__ = (
        Index('idx_employees_department', 'department_id'),
    )
