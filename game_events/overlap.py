"""Collision rules between temporal conditions.

Two conditions collide when some instant satisfies both. The registry checks
a candidate against every stored condition and rejects it on the first hit.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from game_events.conditions import ConditionType, DiscreteSet, Instant, TimeRange
from game_events.models import GameEvent

CollisionRule = Callable[[Any, Any], bool]


def _instant_vs_instant(existing: Instant, candidate: Instant) -> bool:
    return existing.value == candidate.value


def _instant_vs_other(existing: Instant, candidate: TimeRange | DiscreteSet) -> bool:
    return candidate.matches(existing.value)


def _range_vs_instant(existing: TimeRange, candidate: Instant) -> bool:
    return existing.matches(candidate.value)


def _range_vs_range(existing: TimeRange, candidate: TimeRange) -> bool:
    # Half-open intervals: [0, 5) and [5, 9) touch but do not intersect.
    return max(existing.x, candidate.x) < min(existing.y, candidate.y)


def _range_vs_set(existing: TimeRange, candidate: DiscreteSet) -> bool:
    return any(existing.matches(v) for v in candidate.values)


def _set_vs_instant(existing: DiscreteSet, candidate: Instant) -> bool:
    return candidate.value in existing.values


def _set_vs_range(existing: DiscreteSet, candidate: TimeRange) -> bool:
    return any(candidate.matches(v) for v in existing.values)


def _set_vs_set(existing: DiscreteSet, candidate: DiscreteSet) -> bool:
    return not set(existing.values).isdisjoint(candidate.values)


COLLISION_RULES: dict[tuple[ConditionType, ConditionType], CollisionRule] = {
    (ConditionType.instant, ConditionType.instant): _instant_vs_instant,
    (ConditionType.instant, ConditionType.range): _instant_vs_other,
    (ConditionType.instant, ConditionType.discrete_set): _instant_vs_other,
    (ConditionType.range, ConditionType.instant): _range_vs_instant,
    (ConditionType.range, ConditionType.range): _range_vs_range,
    (ConditionType.range, ConditionType.discrete_set): _range_vs_set,
    (ConditionType.discrete_set, ConditionType.instant): _set_vs_instant,
    (ConditionType.discrete_set, ConditionType.range): _set_vs_range,
    (ConditionType.discrete_set, ConditionType.discrete_set): _set_vs_set,
}


def _type_of(condition: Any) -> ConditionType:
    if isinstance(condition, (Instant, TimeRange, DiscreteSet)):
        return ConditionType(condition.type)
    raise TypeError(f"Unsupported condition: {type(condition).__name__}")


def rule_for(existing: Any, candidate: Any) -> CollisionRule:
    return COLLISION_RULES[(_type_of(existing), _type_of(candidate))]


def collides(existing: Any, candidate: Any) -> bool:
    """True if some instant would trigger both conditions.

    A missing condition never fires, so it never collides.
    """

    if existing is None or candidate is None:
        return False
    return rule_for(existing, candidate)(existing, candidate)


def find_conflicts(events: Iterable[GameEvent], candidate: Any) -> list[GameEvent]:
    return [e for e in events if collides(e.condition, candidate)]
