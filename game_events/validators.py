"""Acceptance checks for a candidate event.

The registry runs every submission through one pipeline, so the order of
checks (and therefore which error a caller sees) lives in one place.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from game_events.classifier import event_problem
from game_events.errors import DuplicateConditionError, InvalidEventError
from game_events.models import GameEvent
from game_events.overlap import collides


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """The candidate plus a snapshot of what is already registered."""

    event: GameEvent
    registered: tuple[GameEvent, ...]


class EventValidator(ABC):
    """A small, composable validation unit for a candidate event."""

    @abstractmethod
    def validate(self, *, ctx: ValidationContext) -> None:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class DuplicateConditionValidator(EventValidator):
    """Reject a candidate that could fire at the same instant as a registered event."""

    def validate(self, *, ctx: ValidationContext) -> None:
        for existing in ctx.registered:
            if collides(existing.condition, ctx.event.condition):
                raise DuplicateConditionError(ctx.event, conflicting=existing)


@dataclass(frozen=True, slots=True)
class EventShapeValidator(EventValidator):
    def validate(self, *, ctx: ValidationContext) -> None:
        problem = event_problem(ctx.event)
        if problem is not None:
            raise InvalidEventError(ctx.event, reason=problem)


@dataclass(frozen=True, slots=True)
class ValidatorPipeline:
    validators: tuple[EventValidator, ...]

    def validate(self, *, ctx: ValidationContext) -> None:
        for v in self.validators:
            v.validate(ctx=ctx)


# Duplication is reported before shape problems.
DEFAULT_PIPELINE = ValidatorPipeline(
    validators=(
        DuplicateConditionValidator(),
        EventShapeValidator(),
    )
)
