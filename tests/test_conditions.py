from __future__ import annotations

import pytest
from pydantic import ValidationError

from game_events import ConditionType, DiscreteSet, GameEvent, Instant, TimeRange
from game_events.conditions import as_condition


def test_range_matches_half_open_interval() -> None:
    r = TimeRange(x=0, y=2)

    assert r.matches(-1) is False
    assert r.matches(0) is True
    assert r.matches(1) is True
    assert r.matches(2) is False
    assert r.matches(3) is False


@pytest.mark.parametrize("x,y", [(0, 1), (2, 10), (5, 5), (7, 100)])
def test_range_excludes_upper_bound_and_below_start(x: int, y: int) -> None:
    r = TimeRange(x=x, y=y)

    assert r.matches(y) is False
    assert r.matches(x - 1) is False
    assert [t for t in range(x - 2, y + 2) if r.matches(t)] == list(range(x, y))
    assert r.length == y - x


def test_discrete_set_matches_only_listed_instants() -> None:
    d = DiscreteSet(values=(2, 3, 4))

    assert d.matches(1) is False
    assert d.matches(2) is True
    assert d.matches(3) is True
    assert d.matches(4) is True
    assert d.matches(5) is False


def test_instant_matches_single_value() -> None:
    i = Instant(value=7)

    assert i.matches(7) is True
    assert i.matches(6) is False
    assert i.instants() == (7,)


def test_contains_operator_delegates_to_matches() -> None:
    assert 3 in TimeRange(x=0, y=5)
    assert 5 not in TimeRange(x=0, y=5)
    assert 4 in DiscreteSet(values=(4, 9))
    assert "4" not in DiscreteSet(values=(4, 9))
    assert True not in Instant(value=1)


def test_constructors_do_not_check_ordering_or_uniqueness() -> None:
    # Malformed shapes are representable; the classifier rejects them later.
    assert TimeRange(x=5, y=1).x == 5
    assert TimeRange(x=-1, y=2).x == -1
    assert DiscreteSet(values=(5, 5)).values == (5, 5)
    assert DiscreteSet(values=()).values == ()


def test_constructors_reject_non_integer_fields() -> None:
    with pytest.raises(ValidationError):
        TimeRange(x=1.5, y=3)
    with pytest.raises(ValidationError):
        DiscreteSet(values=("1", 2))
    with pytest.raises(ValidationError):
        Instant(value=True)


def test_conditions_are_frozen() -> None:
    r = TimeRange(x=0, y=3)
    with pytest.raises(ValidationError):
        r.x = 1  # type: ignore[misc]


def test_discrete_set_instants_are_sorted() -> None:
    assert DiscreteSet(values=[20, 11, 15]).instants() == (11, 15, 20)


def test_as_condition_promotes_bare_int() -> None:
    assert as_condition(4) == Instant(value=4)
    assert as_condition(True) is True
    r = TimeRange(x=1, y=2)
    assert as_condition(r) is r


def test_game_event_coerces_bare_int_to_instant() -> None:
    e = GameEvent(kind="A", condition=0)

    assert isinstance(e.condition, Instant)
    assert e.condition.type == ConditionType.instant
    assert e.matches(0) is True
    assert e.matches(1) is False


def test_game_event_without_condition_never_matches() -> None:
    assert GameEvent(kind="A").matches(0) is False


def test_game_event_json_keeps_condition_kind() -> None:
    e = GameEvent(kind="C", condition=DiscreteSet(values=(11, 15, 20)))

    restored = GameEvent.model_validate_json(e.model_dump_json())

    assert restored == e
    assert isinstance(restored.condition, DiscreteSet)


def test_game_event_accepts_tagged_mapping() -> None:
    e = GameEvent.model_validate({"kind": "B", "condition": {"type": "range", "x": 2, "y": 10}})

    assert e.condition == TimeRange(x=2, y=10)
