"""
Base Repository Pattern with SQLAlchemy

Provides the operations shared by all repositories.
"""
from datetime import date
from typing import TypeVar, Generic, Type

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from database.models.base import Base


# Generic type for model classes
ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """
    Base repository bound to one model.

    Subclasses should set the `model` class attribute to their specific
    SQLAlchemy model class.

    Example:
        class EmployeeRepository(BaseRepository[Employee]):
            model = Employee
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def count(self) -> int:
        """Count all entities."""
        stmt = select(func.count()).select_from(self.model)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    @staticmethod
    def today() -> date:
        """Get current date."""
        return date.today()
