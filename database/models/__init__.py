"""
SQLAlchemy ORM Models

Models are organized by domain:
- Organization: Departments and employees
- Issues: Issues, comments and their lookup tables
"""

from .base import Base, TimestampMixin, LabelMixin
from .organization import Department, Employee
from .issues import Priority, Status, Category, Issue, IssueComment

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    "LabelMixin",
    # Organization
    "Department",
    "Employee",
    # Issues
    "Priority",
    "Status",
    "Category",
    "Issue",
    "IssueComment",
]
