"""
Ranking Module - leaderboard core

Aggregate raw events per actor, re-weight the counts, assign
competition ranks.

Components:
- aggregate: Count events per actor within an optional date range
- WeightedScorer: One scorer, parameterized by a WeightTable
- rank_actors: Competition ranking (1, 1, 3)
- TTLCache: Time-boxed cache for computed leaderboards
"""

from .models import (
    DateRange,
    ResolverEvent,
    CommenterEvent,
    FinderEvent,
    RawEvent,
    ActorCount,
    ScoredActor,
    LeaderboardEntry,
)
from .config import (
    WeightTable,
    RESOLVER_WEIGHTS,
    COMMENTER_WEIGHTS,
    FINDER_WEIGHTS,
)
from .aggregator import aggregate, filter_events
from .scorer import WeightedScorer, group_by_actor, round_half_up
from .ranker import rank_actors
from .cache import TTLCache


__all__ = [
    # Models
    "DateRange",
    "ResolverEvent",
    "CommenterEvent",
    "FinderEvent",
    "RawEvent",
    "ActorCount",
    "ScoredActor",
    "LeaderboardEntry",
    # Config
    "WeightTable",
    "RESOLVER_WEIGHTS",
    "COMMENTER_WEIGHTS",
    "FINDER_WEIGHTS",
    # Core
    "aggregate",
    "filter_events",
    "WeightedScorer",
    "group_by_actor",
    "round_half_up",
    "rank_actors",
    "TTLCache",
]
