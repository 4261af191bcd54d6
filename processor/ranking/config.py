"""
Weight tables for leaderboard scoring.

Each leaderboard gets its own table; they are deliberately not shared.
"""
from dataclasses import dataclass, field
from typing import Dict, Tuple

from constants import PriorityTier, StatusTier


@dataclass(frozen=True)
class WeightTable:
    """
    Multipliers applied to each event before it is added to a score.

    Attributes:
        priority_weights: priority tier -> multiplier
        status_weights: status tier -> multiplier (empty: not applied)
        speed_bonus: (max_hours, multiplier) brackets checked in order
            against an event's resolution time (empty: not applied)
    """
    name: str
    priority_weights: Dict[int, float]
    status_weights: Dict[int, float] = field(default_factory=dict)
    speed_bonus: Tuple[Tuple[float, float], ...] = ()


# ============================================
# RESOLVERS
# ============================================

RESOLVER_WEIGHTS = WeightTable(
    name="resolver",
    priority_weights={
        PriorityTier.CRITICAL: 5,
        PriorityTier.HIGH: 3,
        PriorityTier.MEDIUM: 2,
        PriorityTier.LOW: 1,
    },
    speed_bonus=(
        (24, 1.5),   # resolved within a day
        (48, 1.2),   # within two days
    ),
)


# ============================================
# COMMENTERS
# ============================================

COMMENTER_WEIGHTS = WeightTable(
    name="commenter",
    priority_weights={
        PriorityTier.CRITICAL: 3,
        PriorityTier.HIGH: 2,
        PriorityTier.MEDIUM: 1,
        PriorityTier.LOW: 0.5,
    },
    status_weights={
        StatusTier.RESOLVED: 1.5,
        StatusTier.VERIFIED: 1.2,
        StatusTier.CLOSED: 1.1,
    },
)


# ============================================
# FINDERS
# ============================================

# Severity weights; a finder's score is the sum over reported issues
FINDER_WEIGHTS = WeightTable(
    name="finder",
    priority_weights={
        PriorityTier.CRITICAL: 5,
        PriorityTier.HIGH: 3,
        PriorityTier.MEDIUM: 2,
        PriorityTier.LOW: 1,
    },
)
