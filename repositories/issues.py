"""
Issue Repository

Handles database reads for issues: leaderboard aggregates, the raw events
behind them, and the dashboard statistics.
"""
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from sqlalchemy import select, func, desc
from sqlalchemy.orm import selectinload

from constants import StatusTier
from database.models import Issue
from processor.ranking.models import ActorCount, DateRange, FinderEvent, ResolverEvent
from .base import BaseRepository


class IssueRepository(BaseRepository[Issue]):
    """Repository for issue operations."""

    model = Issue

    # ============================================
    # RESOLVERS
    # ============================================

    async def count_resolved_by_solver(
        self,
        date_range: Optional[DateRange] = None,
        limit: int = 3
    ) -> List[ActorCount]:
        """
        Count resolved issues per solver.

        Args:
            date_range: Optional closed interval on `updated_at`
            limit: Maximum number of solvers

        Returns:
            Top solvers by resolved count; ties ordered by solver id
        """
        resolved_count = func.count(Issue.id).label("resolved_count")
        stmt = (
            select(Issue.solver_id, resolved_count)
            .where(
                Issue.status_id == StatusTier.RESOLVED,
                Issue.solver_id.is_not(None),
            )
            .group_by(Issue.solver_id)
            .order_by(desc(resolved_count), Issue.solver_id)
            .limit(limit)
        )
        if date_range is not None:
            stmt = stmt.where(Issue.updated_at.between(date_range.start, date_range.end))

        result = await self.session.execute(stmt)
        return [ActorCount(actor_id=row.solver_id, raw_count=row.resolved_count) for row in result]

    async def get_resolver_events(
        self,
        solver_ids: List[int],
        date_range: Optional[DateRange] = None
    ) -> List[ResolverEvent]:
        """Resolved issues of the given solvers as scoring events."""
        if not solver_ids:
            return []

        stmt = select(
            Issue.solver_id,
            Issue.priority_id,
            Issue.status_id,
            Issue.created_at,
            Issue.updated_at,
        ).where(
            Issue.status_id == StatusTier.RESOLVED,
            Issue.solver_id.in_(solver_ids),
        )
        if date_range is not None:
            stmt = stmt.where(Issue.updated_at.between(date_range.start, date_range.end))

        result = await self.session.execute(stmt)
        return [
            ResolverEvent(
                actor_id=row.solver_id,
                priority_tier=row.priority_id,
                status_tier=row.status_id,
                created_at=row.created_at,
                updated_at=row.updated_at,
            )
            for row in result
        ]

    # ============================================
    # FINDERS
    # ============================================

    async def get_finder_events(self, date_range: Optional[DateRange] = None) -> List[FinderEvent]:
        """Reported issues (by assignee) as scoring events, oldest first."""
        stmt = (
            select(Issue.assignee_id, Issue.priority_id, Issue.created_at)
            .where(Issue.assignee_id.is_not(None))
            .order_by(Issue.id)
        )
        if date_range is not None:
            stmt = stmt.where(Issue.created_at.between(date_range.start, date_range.end))

        result = await self.session.execute(stmt)
        return [
            FinderEvent(
                actor_id=row.assignee_id,
                priority_tier=row.priority_id,
                created_at=row.created_at,
            )
            for row in result
        ]

    # ============================================
    # DASHBOARD STATISTICS
    # ============================================

    async def count_by(self, column_name: str) -> Dict[Optional[int], int]:
        """
        Count issues grouped by a foreign key column.

        Args:
            column_name: 'status_id', 'priority_id', 'department_id' or 'category_id'
        """
        column = getattr(Issue, column_name)
        stmt = select(column, func.count(Issue.id)).group_by(column)
        result = await self.session.execute(stmt)
        return {key: count for key, count in result.all()}

    async def get_recent(self, limit: int = 5) -> Sequence[Issue]:
        """Most recently created issues with their lookups loaded."""
        stmt = (
            select(Issue)
            .options(
                selectinload(Issue.department),
                selectinload(Issue.status),
                selectinload(Issue.priority),
                selectinload(Issue.category),
            )
            .order_by(desc(Issue.created_at), desc(Issue.id))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def get_upcoming_due(
        self,
        days: int = 7,
        limit: int = 5,
        today: Optional[date] = None
    ) -> Sequence[Issue]:
        """
        Open issues due within the next `days` days, soonest first.

        Resolved and verified issues are excluded.
        """
        today = today or self.today()
        stmt = (
            select(Issue)
            .options(
                selectinload(Issue.department),
                selectinload(Issue.status),
                selectinload(Issue.priority),
                selectinload(Issue.category),
            )
            .where(
                Issue.due_date.between(today, today + timedelta(days=days)),
                Issue.status_id.not_in([StatusTier.RESOLVED, StatusTier.VERIFIED]),
            )
            .order_by(Issue.due_date)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()
