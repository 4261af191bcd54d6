"""
Scorer - weighted leaderboard scores.

A single scorer serves every leaderboard; the weight table decides which
multipliers apply.
"""
import math
from typing import Dict, Iterable, List, Sequence

from loguru import logger

from .config import WeightTable
from .models import ActorCount, RawEvent, ResolverEvent, ScoredActor


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return math.floor(value + 0.5)


class WeightedScorer:
    """
    Re-weights raw counts using per-event multipliers.

    score = raw_count + sum(event_score - 1), where event_score starts at 1
    and is multiplied by the priority weight, the status weight and the
    resolution speed bonus when the table defines them.
    """

    def __init__(self, weights: WeightTable):
        self.weights = weights

    def event_score(self, event: RawEvent) -> float:
        """Weighted value of a single event."""
        score = 1.0

        priority_weight = self.weights.priority_weights.get(event.priority_tier)
        if priority_weight:
            score *= priority_weight

        if self.weights.status_weights:
            status_weight = self.weights.status_weights.get(getattr(event, "status_tier", None))
            if status_weight:
                score *= status_weight

        if self.weights.speed_bonus and isinstance(event, ResolverEvent):
            hours = event.resolution_hours
            if hours is not None:
                for max_hours, bonus in self.weights.speed_bonus:
                    if hours <= max_hours:
                        score *= bonus
                        break

        return score

    def score(self, raw_count: int, events: Iterable[RawEvent]) -> int:
        """
        Weighted score of one actor.

        Each event contributes its delta above the baseline of 1 already
        counted in `raw_count`. The result is never negative.
        """
        total = float(raw_count)
        for event in events:
            total += self.event_score(event) - 1
        return max(0, round_half_up(total))

    def score_actors(
        self,
        counts: Sequence[ActorCount],
        events_by_actor: Dict[int, List[RawEvent]]
    ) -> List[ScoredActor]:
        """
        Score every actor in `counts`.

        An actor whose score cannot be computed keeps its raw count as
        score; the other actors are unaffected.
        """
        scored = []
        for item in counts:
            try:
                score = self.score(item.raw_count, events_by_actor.get(item.actor_id, []))
            except Exception as e:
                logger.warning(
                    f"[{self.weights.name}] scoring failed for actor {item.actor_id}, "
                    f"falling back to raw count: {e}"
                )
                score = item.raw_count
            scored.append(ScoredActor(actor_id=item.actor_id, raw_count=item.raw_count, score=score))
        return scored


def group_by_actor(events: Iterable[RawEvent]) -> Dict[int, List[RawEvent]]:
    """Index events by actor id."""
    grouped: Dict[int, List[RawEvent]] = {}
    for event in events:
        grouped.setdefault(event.actor_id, []).append(event)
    return grouped
