from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class ConditionType(StrEnum):
    instant = "instant"
    range = "range"
    discrete_set = "discrete_set"


class _Condition(BaseModel):
    """Shared behaviour of the three temporal condition kinds.

    These are plain value holders: field *types* are enforced by pydantic, but
    ordering, sign and uniqueness rules are left to `game_events.classifier`
    so a malformed condition can still be built and then rejected with a reason.
    """

    model_config = ConfigDict(frozen=True)

    def matches(self, instant: int) -> bool:
        raise NotImplementedError

    def __contains__(self, instant: object) -> bool:
        return isinstance(instant, int) and not isinstance(instant, bool) and self.matches(instant)


class Instant(_Condition):
    """Fires exactly at `value`."""

    type: Literal["instant"] = "instant"
    value: StrictInt

    def matches(self, instant: int) -> bool:
        return instant == self.value

    def instants(self) -> tuple[int, ...]:
        return (self.value,)


class TimeRange(_Condition):
    """Fires for every instant in the half-open range ``[x, y)``."""

    type: Literal["range"] = "range"
    x: StrictInt
    y: StrictInt

    def matches(self, instant: int) -> bool:
        return self.x <= instant < self.y

    @property
    def length(self) -> int:
        return self.y - self.x


class DiscreteSet(_Condition):
    """Fires exactly at each listed instant."""

    type: Literal["discrete_set"] = "discrete_set"
    values: tuple[StrictInt, ...]

    def matches(self, instant: int) -> bool:
        return instant in self.values

    def instants(self) -> tuple[int, ...]:
        return tuple(sorted(self.values))


TemporalCondition = Annotated[Instant | TimeRange | DiscreteSet, Field(discriminator="type")]

CONDITION_MODELS: tuple[type[_Condition], ...] = (Instant, TimeRange, DiscreteSet)


def as_condition(value: Any) -> Any:
    """Promote a bare integer to an `Instant`; everything else passes through.

    Values that are not conditions are returned unchanged so the classifier can
    report them.
    """

    if isinstance(value, int) and not isinstance(value, bool):
        return Instant(value=value)
    return value
