"""
Processor package for the Factory Issue Dashboard.

- ranking: Aggregate, score and rank leaderboard actors (pure)
- leaderboards: Top resolvers, commenters and finders over the store
- dashboard: Issue statistics summary
- labels: Localized label selection

The store-backed services are imported from their modules directly:
    from processor.leaderboards import LeaderboardService
"""

from .ranking import (
    aggregate,
    WeightedScorer,
    rank_actors,
    TTLCache,
    DateRange,
)
from .labels import label_field, localized_label

__all__ = [
    "aggregate",
    "WeightedScorer",
    "rank_actors",
    "TTLCache",
    "DateRange",
    "label_field",
    "localized_label",
]
