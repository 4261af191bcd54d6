"""
Ranker - competition ranking with gaps after ties.
"""
from dataclasses import replace
from typing import Any, Callable, List, Optional, Sequence

from .models import ScoredActor


def _by_score(actor: ScoredActor) -> Any:
    return actor.score


def rank_actors(
    actors: Sequence[ScoredActor],
    key: Optional[Callable[[ScoredActor], Any]] = None
) -> List[ScoredActor]:
    """
    Sort actors by `key` descending and assign ranks.

    Equal keys share a rank; the next distinct key resumes at its 1-based
    position, so scores 10, 10, 8 rank 1, 1, 3. The sort is stable.

    Args:
        actors: Unranked actors
        key: Ranking key, defaults to the score

    Returns:
        New ScoredActor instances with `rank` set
    """
    key = key or _by_score
    ordered = sorted(actors, key=key, reverse=True)

    ranked = []
    previous_key = None
    rank = 0
    for position, actor in enumerate(ordered, start=1):
        current_key = key(actor)
        if position == 1 or current_key != previous_key:
            rank = position
        previous_key = current_key
        ranked.append(replace(actor, rank=rank))

    return ranked
