"""
Leaderboards - top resolvers, commenters and finders.

Each leaderboard runs the same three steps over a different event source:
aggregate raw counts, re-weight them, assign competition ranks. The
aggregation and event fetches go through the repositories; the scoring and
ranking are pure (see processor.ranking).
"""
from typing import Dict, List, Optional, Sequence, Tuple

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from constants import NO_DEPARTMENT_LABEL
from database.models import Employee
from repositories import CommentRepository, EmployeeRepository, IssueRepository
from .labels import label_field, localized_label
from .ranking import (
    COMMENTER_WEIGHTS,
    FINDER_WEIGHTS,
    RESOLVER_WEIGHTS,
    DateRange,
    LeaderboardEntry,
    RawEvent,
    ScoredActor,
    WeightedScorer,
    aggregate,
    group_by_actor,
    rank_actors,
)


class LeaderboardService:
    """
    Builds the dashboard leaderboards for one request.

    Usage:
        async with get_session() as session:
            service = LeaderboardService(session)
            rows = await service.top_resolvers(date_range, lang="en")
    """

    def __init__(self, session: AsyncSession):
        self.issues = IssueRepository(session)
        self.comments = CommentRepository(session)
        self.employees = EmployeeRepository(session)

        self.resolver_scorer = WeightedScorer(RESOLVER_WEIGHTS)
        self.commenter_scorer = WeightedScorer(COMMENTER_WEIGHTS)
        self.finder_scorer = WeightedScorer(FINDER_WEIGHTS)

    # ============================================
    # LEADERBOARDS
    # ============================================

    async def top_resolvers(
        self,
        date_range: Optional[DateRange] = None,
        lang: Optional[str] = None,
        limit: int = 3
    ) -> List[LeaderboardEntry]:
        """Employees who resolved the most issues, weighted by priority and speed."""
        counts = await self.issues.count_resolved_by_solver(date_range, limit)
        logger.debug(f"[resolvers] aggregate: {[(c.actor_id, c.raw_count) for c in counts]}")

        events = await self._fetch_events(
            "resolvers",
            self.issues.get_resolver_events,
            [c.actor_id for c in counts],
            date_range,
        )
        scored = self.resolver_scorer.score_actors(counts, group_by_actor(events))
        known, employees = await self._known_actors(scored)

        return self._to_entries(rank_actors(known), employees, lang, "resolvedCount", NO_DEPARTMENT_LABEL)

    async def top_commenters(
        self,
        date_range: Optional[DateRange] = None,
        lang: Optional[str] = None,
        limit: int = 3
    ) -> List[LeaderboardEntry]:
        """Employees who commented the most, weighted by the issues' priority and status."""
        counts = await self.comments.count_by_author(date_range, limit)
        logger.debug(f"[commenters] aggregate: {[(c.actor_id, c.raw_count) for c in counts]}")
        if not counts:
            logger.info("[commenters] no comments in the requested range")

        events = await self._fetch_events(
            "commenters",
            self.comments.get_commenter_events,
            [c.actor_id for c in counts],
            date_range,
        )
        scored = self.commenter_scorer.score_actors(counts, group_by_actor(events))
        known, employees = await self._known_actors(scored)

        return self._to_entries(rank_actors(known), employees, lang, "commentCount", "")

    async def top_finders(
        self,
        date_range: Optional[DateRange] = None,
        lang: Optional[str] = None,
        limit: int = 3
    ) -> List[LeaderboardEntry]:
        """
        Employees who reported the most issues.

        Ordered by issue count; equal counts are separated by a severity
        score (sum of priority weights). Entries tie only when both match.
        """
        events = await self.issues.get_finder_events(date_range)
        counts = aggregate(events)
        scored = self.finder_scorer.score_actors(counts, group_by_actor(events))
        known, employees = await self._known_actors(scored)
        ranked = rank_actors(known, key=lambda actor: (actor.raw_count, actor.score))[:limit]

        return self._to_entries(ranked, employees, lang, "issueCount", NO_DEPARTMENT_LABEL)

    # ============================================
    # HELPERS
    # ============================================

    async def _fetch_events(
        self,
        board: str,
        fetch,
        actor_ids: List[int],
        date_range: Optional[DateRange]
    ) -> List[RawEvent]:
        """
        Fetch scoring events; on a store error every actor keeps its raw count.
        """
        try:
            return await fetch(actor_ids, date_range)
        except SQLAlchemyError as e:
            logger.warning(f"[{board}] could not load scoring events, using raw counts: {e}")
            return []

    async def _known_actors(
        self,
        scored: Sequence[ScoredActor]
    ) -> Tuple[List[ScoredActor], Dict[int, Employee]]:
        """Drop actors without an employee row, so ranks are assigned to shown rows only."""
        employees: Dict[int, Employee] = await self.employees.get_with_departments(
            [actor.actor_id for actor in scored]
        )

        known = []
        for actor in scored:
            if actor.actor_id not in employees:
                logger.warning(f"Employee {actor.actor_id} not found, skipping leaderboard row")
                continue
            known.append(actor)
        return known, employees

    @staticmethod
    def _to_entries(
        ranked: Sequence[ScoredActor],
        employees: Dict[int, Employee],
        lang: Optional[str],
        count_field: str,
        no_department: str
    ) -> List[LeaderboardEntry]:
        """Join ranked actors with their employee details."""
        logger.debug(f"Department label field for lang={lang}: {label_field(lang)}")

        entries = []
        for actor in ranked:
            employee = employees[actor.actor_id]
            entries.append(LeaderboardEntry(
                id=employee.id,
                display_name=employee.korean_name,
                secondary_name=employee.thai_name,
                nickname=employee.nickname,
                department_label=localized_label(employee.department, lang, no_department),
                count=actor.raw_count,
                score=actor.score,
                rank=actor.rank,
                count_field=count_field,
            ))

        logger.info(
            f"[{count_field}] final ranking: "
            f"{[(e.id, e.count, e.score, e.rank) for e in entries]}"
        )
        return entries
