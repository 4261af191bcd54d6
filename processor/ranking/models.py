"""
Data models for the ranking module.

Raw events are a tagged union keyed by `kind`; each leaderboard builds its
events from a different table and filters them on a different timestamp.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, Optional, Union

from constants import EventKind


@dataclass(frozen=True)
class DateRange:
    """Closed interval [start, end]."""
    start: datetime
    end: datetime

    @classmethod
    def from_bounds(
        cls,
        start: Optional[datetime],
        end: Optional[datetime]
    ) -> Optional["DateRange"]:
        """
        Build a range only when both bounds are given.

        A single bound disables filtering entirely.
        """
        if start is None or end is None:
            return None
        return cls(start=start, end=end)

    def contains(self, moment: Optional[datetime]) -> bool:
        if moment is None:
            return False
        return self.start <= moment <= self.end


@dataclass(frozen=True)
class ResolverEvent:
    """An issue resolved by `actor_id`."""
    actor_id: int
    priority_tier: Optional[int]
    status_tier: Optional[int]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    kind: Literal[EventKind.RESOLVER] = field(default=EventKind.RESOLVER, init=False)

    @property
    def timestamp(self) -> Optional[datetime]:
        # No resolved_at column: the last update is the resolution time
        return self.updated_at

    @property
    def resolution_hours(self) -> Optional[float]:
        if self.created_at is None or self.updated_at is None:
            return None
        return (self.updated_at - self.created_at).total_seconds() / 3600


@dataclass(frozen=True)
class CommenterEvent:
    """A comment by `actor_id`; tiers are those of the commented issue."""
    actor_id: int
    priority_tier: Optional[int]
    status_tier: Optional[int]
    created_at: Optional[datetime]
    kind: Literal[EventKind.COMMENTER] = field(default=EventKind.COMMENTER, init=False)

    @property
    def timestamp(self) -> Optional[datetime]:
        return self.created_at


@dataclass(frozen=True)
class FinderEvent:
    """An issue reported by `actor_id`."""
    actor_id: int
    priority_tier: Optional[int]
    created_at: Optional[datetime]
    kind: Literal[EventKind.FINDER] = field(default=EventKind.FINDER, init=False)

    @property
    def timestamp(self) -> Optional[datetime]:
        return self.created_at


RawEvent = Union[ResolverEvent, CommenterEvent, FinderEvent]


@dataclass(frozen=True)
class ActorCount:
    """Raw event count for one actor."""
    actor_id: int
    raw_count: int


@dataclass(frozen=True)
class ScoredActor:
    """Weighted score for one actor; `rank` is set by the ranker."""
    actor_id: int
    raw_count: int
    score: int
    rank: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "actor_id": self.actor_id,
            "raw_count": self.raw_count,
            "score": self.score,
            "rank": self.rank,
        }


@dataclass
class LeaderboardEntry:
    """One serialized leaderboard row."""
    id: int
    display_name: str
    secondary_name: Optional[str]
    nickname: Optional[str]
    department_label: str
    count: int
    score: int
    rank: int
    count_field: str = "count"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "displayName": self.display_name,
            "secondaryName": self.secondary_name,
            "nickname": self.nickname,
            "departmentLabel": self.department_label,
            self.count_field: self.count,
            "score": self.score,
            "rank": self.rank,
        }
