"""
Aggregator - count raw events per actor.
"""
from collections import Counter
from typing import Iterable, List, Optional

from .models import ActorCount, DateRange, RawEvent


def filter_events(
    events: Iterable[RawEvent],
    date_range: Optional[DateRange] = None
) -> List[RawEvent]:
    """Keep events whose timestamp falls inside `date_range` (inclusive)."""
    if date_range is None:
        return list(events)
    return [e for e in events if date_range.contains(e.timestamp)]


def aggregate(
    events: Iterable[RawEvent],
    limit: Optional[int] = None,
    date_range: Optional[DateRange] = None
) -> List[ActorCount]:
    """
    Group events by actor and return the top actors by raw count.

    Args:
        events: Raw events of a single kind
        limit: Maximum number of actors returned (None: all)
        date_range: Optional closed interval on the event timestamp

    Returns:
        Actor counts sorted by count descending; ties keep the order in
        which the actors were first seen.
    """
    counts = Counter(
        event.actor_id
        for event in filter_events(events, date_range)
        if event.actor_id is not None
    )
    return [
        ActorCount(actor_id=actor_id, raw_count=count)
        for actor_id, count in counts.most_common(limit)
    ]
