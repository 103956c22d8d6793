"""Recognise which temporal condition a value is, and whether it is well formed.

Every predicate here is backed by a ``*_problem`` function that returns the
first reason a value is rejected (or None). The registry uses the reasons for
`InvalidEventError` messages; callers that only need a yes/no use ``is_*``.
"""

from __future__ import annotations

from typing import Any

from game_events.conditions import ConditionType, DiscreteSet, Instant, TimeRange
from game_events.models import GameEvent


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def instant_problem(value: Any) -> str | None:
    if isinstance(value, Instant):
        value = value.value
    if not _is_int(value):
        return f"instant must be an integer, got {type(value).__name__}"
    if value < 0:
        return f"instant must be non-negative, got {value}"
    return None


def range_problem(value: Any) -> str | None:
    if not isinstance(value, TimeRange):
        return f"expected a TimeRange, got {type(value).__name__}"
    if value.x < 0 or value.y < 0:
        return f"range bounds must be non-negative, got [{value.x}, {value.y})"
    if value.x > value.y:
        return f"range start must not exceed its end, got [{value.x}, {value.y})"
    return None


def discrete_set_problem(value: Any) -> str | None:
    if not isinstance(value, DiscreteSet):
        return f"expected a DiscreteSet, got {type(value).__name__}"
    if not value.values:
        return "discrete set must contain at least one instant"

    seen: set[int] = set()
    for v in value.values:
        if v < 0:
            return f"discrete set instants must be non-negative, got {v}"
        if v in seen:
            return f"discrete set instants must be unique, {v} appears twice"
        seen.add(v)
    return None


def condition_problem(value: Any) -> str | None:
    if value is None:
        return "condition is missing"
    if isinstance(value, TimeRange):
        return range_problem(value)
    if isinstance(value, DiscreteSet):
        return discrete_set_problem(value)
    if isinstance(value, Instant) or _is_int(value):
        return instant_problem(value)
    return f"unsupported condition type {type(value).__name__}"


def event_problem(event: Any) -> str | None:
    if not isinstance(event, GameEvent):
        return f"expected a GameEvent, got {type(event).__name__}"
    if not isinstance(event.kind, str) or event.kind == "":
        return "event kind must be a non-empty string"
    return condition_problem(event.condition)


def is_instant(value: Any) -> bool:
    return instant_problem(value) is None


def is_range(value: Any) -> bool:
    return range_problem(value) is None


def is_discrete_set(value: Any) -> bool:
    return discrete_set_problem(value) is None


def is_valid_condition(value: Any) -> bool:
    return condition_problem(value) is None


def is_valid_event(event: Any) -> bool:
    return event_problem(event) is None


def classify(value: Any) -> ConditionType | None:
    """Kind of a well-formed condition, or None when `value` is not one."""

    if is_range(value):
        return ConditionType.range
    if is_discrete_set(value):
        return ConditionType.discrete_set
    if is_instant(value):
        return ConditionType.instant
    return None
