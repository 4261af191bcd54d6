"""
Employee Repository

Handles database reads for employees and their departments.
"""
from typing import Dict, List

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from database.models import Employee
from .base import BaseRepository


class EmployeeRepository(BaseRepository[Employee]):
    """Repository for employee operations."""

    model = Employee

    async def get_with_departments(self, employee_ids: List[int]) -> Dict[int, Employee]:
        """
        Load employees with their department, keyed by id.

        Unknown ids are simply missing from the result.
        """
        if not employee_ids:
            return {}

        stmt = (
            select(Employee)
            .options(selectinload(Employee.department))
            .where(Employee.id.in_(employee_ids))
        )
        result = await self.session.execute(stmt)
        return {employee.id: employee for employee in result.scalars().all()}
