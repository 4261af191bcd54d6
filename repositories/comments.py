"""
Comment Repository

Handles database reads for issue comments.
"""
from typing import List, Optional

from sqlalchemy import select, func, desc

from database.models import Issue, IssueComment
from processor.ranking.models import ActorCount, CommenterEvent, DateRange
from .base import BaseRepository


class CommentRepository(BaseRepository[IssueComment]):
    """Repository for comment operations."""

    model = IssueComment

    async def count_by_author(
        self,
        date_range: Optional[DateRange] = None,
        limit: int = 3
    ) -> List[ActorCount]:
        """
        Count comments per author.

        Args:
            date_range: Optional closed interval on `created_at`
            limit: Maximum number of authors

        Returns:
            Top authors by comment count; ties ordered by author id
        """
        comment_count = func.count(IssueComment.id).label("comment_count")
        stmt = (
            select(IssueComment.author_id, comment_count)
            .group_by(IssueComment.author_id)
            .order_by(desc(comment_count), IssueComment.author_id)
            .limit(limit)
        )
        if date_range is not None:
            stmt = stmt.where(IssueComment.created_at.between(date_range.start, date_range.end))

        result = await self.session.execute(stmt)
        return [ActorCount(actor_id=row.author_id, raw_count=row.comment_count) for row in result]

    async def get_commenter_events(
        self,
        author_ids: List[int],
        date_range: Optional[DateRange] = None
    ) -> List[CommenterEvent]:
        """Comments of the given authors, carrying the commented issue's tiers."""
        if not author_ids:
            return []

        stmt = (
            select(
                IssueComment.author_id,
                Issue.priority_id,
                Issue.status_id,
                IssueComment.created_at,
            )
            .outerjoin(Issue, IssueComment.issue_id == Issue.id)
            .where(IssueComment.author_id.in_(author_ids))
        )
        if date_range is not None:
            stmt = stmt.where(IssueComment.created_at.between(date_range.start, date_range.end))

        result = await self.session.execute(stmt)
        return [
            CommenterEvent(
                actor_id=row.author_id,
                priority_tier=row.priority_id,
                status_tier=row.status_id,
                created_at=row.created_at,
            )
            for row in result
        ]
