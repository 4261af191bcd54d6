"""
Lookup Repository

Reads the small label tables: departments, priorities, statuses, categories.
"""
from typing import Dict, Type

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Base


class LookupRepository:
    """Loads whole lookup tables keyed by id."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_map(self, model: Type[Base]) -> Dict[int, Base]:
        """Return every row of `model` keyed by primary key."""
        result = await self.session.execute(select(model).order_by(model.id))
        return {row.id: row for row in result.scalars().all()}
