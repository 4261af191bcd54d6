"""Tests for the weighted scorer and its weight tables."""
import itertools
from datetime import datetime, timedelta

import pytest

from processor.ranking import (
    COMMENTER_WEIGHTS,
    FINDER_WEIGHTS,
    RESOLVER_WEIGHTS,
    ActorCount,
    CommenterEvent,
    FinderEvent,
    ResolverEvent,
    WeightedScorer,
    group_by_actor,
    rank_actors,
    round_half_up,
)

T0 = datetime(2025, 3, 1, 9, 0, 0)


def resolved(actor_id, priority, hours=72):
    return ResolverEvent(
        actor_id=actor_id,
        priority_tier=priority,
        status_tier=3,
        created_at=T0,
        updated_at=T0 + timedelta(hours=hours),
    )


def comment(actor_id, priority, status):
    return CommenterEvent(actor_id=actor_id, priority_tier=priority, status_tier=status, created_at=T0)


@pytest.mark.parametrize("hours,expected", [
    (1, 7.5),
    (24, 7.5),
    (30, 6.0),
    (48, 6.0),
    (49, 5.0),
])
def test_resolver_speed_bonus(hours, expected):
    scorer = WeightedScorer(RESOLVER_WEIGHTS)
    assert scorer.event_score(resolved(1, 1, hours)) == pytest.approx(expected)


def test_resolver_ignores_status_weights():
    scorer = WeightedScorer(RESOLVER_WEIGHTS)
    assert scorer.event_score(resolved(1, 4)) == 1.0


def test_commenter_applies_priority_and_status():
    scorer = WeightedScorer(COMMENTER_WEIGHTS)

    assert scorer.event_score(comment(1, 1, 3)) == pytest.approx(4.5)
    assert scorer.event_score(comment(1, 2, 4)) == pytest.approx(2.4)
    assert scorer.event_score(comment(1, 4, 5)) == pytest.approx(0.55)
    assert scorer.event_score(comment(1, 3, 1)) == pytest.approx(1.0)


def test_unknown_tiers_leave_event_at_baseline():
    scorer = WeightedScorer(COMMENTER_WEIGHTS)
    assert scorer.event_score(comment(1, None, None)) == 1.0
    assert scorer.event_score(comment(1, 9, 9)) == 1.0


def test_missing_timestamps_skip_speed_bonus():
    scorer = WeightedScorer(RESOLVER_WEIGHTS)
    event = ResolverEvent(actor_id=1, priority_tier=2, status_tier=3, created_at=None, updated_at=T0)
    assert scorer.event_score(event) == 3.0


def test_finder_score_is_sum_of_priority_weights():
    scorer = WeightedScorer(FINDER_WEIGHTS)
    events = [FinderEvent(actor_id=1, priority_tier=tier, created_at=T0) for tier in (1, 2, 4, None)]
    assert scorer.score(len(events), events) == 5 + 3 + 1 + 1


def test_round_half_up():
    assert round_half_up(13.5) == 14
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_commenter_score_is_always_a_non_negative_integer():
    scorer = WeightedScorer(COMMENTER_WEIGHTS)
    tiers = list(itertools.product([1, 2, 3, 4, None], [1, 2, 3, 4, 5, None]))

    for pairs in itertools.combinations(tiers, 3):
        events = [comment(1, p, s) for p, s in pairs]
        score = scorer.score(len(events), events)
        assert isinstance(score, int)
        assert score >= 0


def test_low_priority_comments_can_score_below_raw_count():
    scorer = WeightedScorer(COMMENTER_WEIGHTS)
    events = [comment(1, 4, 1) for _ in range(3)]
    # 3 + 3 * (0.5 - 1) = 1.5
    assert scorer.score(3, events) == 2


def test_failed_scoring_falls_back_to_raw_count():
    scorer = WeightedScorer(RESOLVER_WEIGHTS)
    counts = [ActorCount(actor_id=1, raw_count=4), ActorCount(actor_id=2, raw_count=2)]
    events_by_actor = {1: None, 2: [resolved(2, 1)]}

    scored = scorer.score_actors(counts, events_by_actor)

    assert [(s.actor_id, s.score) for s in scored] == [(1, 4), (2, 6)]


def test_actor_without_events_keeps_raw_count():
    scorer = WeightedScorer(RESOLVER_WEIGHTS)
    scored = scorer.score_actors([ActorCount(actor_id=7, raw_count=3)], {})
    assert scored[0].score == 3


def test_equal_resolvers_rank_one_one_three():
    scorer = WeightedScorer(RESOLVER_WEIGHTS)
    events = (
        [resolved(1, 3) for _ in range(10)]
        + [resolved(2, 3) for _ in range(10)]
        + [resolved(3, 3) for _ in range(7)]
    )
    counts = [ActorCount(1, 10), ActorCount(2, 10), ActorCount(3, 7)]

    ranked = rank_actors(scorer.score_actors(counts, group_by_actor(events)))

    # Medium tier weighs 2 for resolvers
    assert [a.score for a in ranked] == [20, 20, 14]
    assert [a.rank for a in ranked] == [1, 1, 3]


def test_unweighted_resolvers_keep_their_counts():
    scorer = WeightedScorer(RESOLVER_WEIGHTS)
    events = (
        [resolved(1, 4) for _ in range(10)]
        + [resolved(2, 4) for _ in range(10)]
        + [resolved(3, 4) for _ in range(7)]
    )
    counts = [ActorCount(1, 10), ActorCount(2, 10), ActorCount(3, 7)]

    ranked = rank_actors(scorer.score_actors(counts, group_by_actor(events)))

    assert [a.score for a in ranked] == [10, 10, 7]
    assert [a.rank for a in ranked] == [1, 1, 3]
