from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from game_events.conditions import TemporalCondition, as_condition


class GameEvent(BaseModel):
    """A labelled event bound to the temporal condition under which it fires.

    Immutable once built. Shape rules (non-empty kind, well-formed condition)
    are checked by the registry on submission, not here.
    """

    model_config = ConfigDict(frozen=True)

    kind: str
    condition: TemporalCondition | None = None

    @field_validator("condition", mode="before")
    @classmethod
    def _bare_int_is_instant(cls, v: Any) -> Any:
        return as_condition(v)

    def matches(self, instant: int) -> bool:
        return self.condition is not None and self.condition.matches(instant)
