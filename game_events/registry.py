from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from game_events.conditions import as_condition
from game_events.errors import EventNotFoundError, GameEventError, InvalidEventError
from game_events.lifecycle import EventLifecycle, EventStatus
from game_events.models import GameEvent
from game_events.overlap import find_conflicts
from game_events.validators import DEFAULT_PIPELINE, ValidationContext, ValidatorPipeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EventSubmission:
    """Outcome of submitting one event.

    - `status`: final lifecycle state (registered or rejected)
    - `error`: why it was rejected, None when registered
    """

    event: Any
    status: EventStatus
    error: GameEventError | None = None

    @property
    def accepted(self) -> bool:
        return self.status == EventStatus.registered


class EventRegistry:
    """Ordered collection of mutually exclusive game events.

    No two registered events can fire at the same instant. Lookups scan in
    insertion order and return the first match.

    Not thread-safe: `add_event` is a check-then-append, so concurrent hosts
    must serialize calls themselves.
    """

    def __init__(self, *, pipeline: ValidatorPipeline = DEFAULT_PIPELINE) -> None:
        self._events: list[GameEvent] = []
        self._pipeline = pipeline

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[GameEvent]:
        return iter(tuple(self._events))

    @property
    def events(self) -> tuple[GameEvent, ...]:
        return tuple(self._events)

    def _submit(self, event: Any) -> EventSubmission:
        lifecycle = EventLifecycle(candidate=event)

        try:
            if not isinstance(event, GameEvent):
                raise InvalidEventError(event, reason=f"expected a GameEvent, got {type(event).__name__}")
            self._pipeline.validate(ctx=ValidationContext(event=event, registered=tuple(self._events)))
        except GameEventError as e:
            lifecycle.reject()
            logger.info("Rejected event %r: %s", event, e)
            return EventSubmission(event=event, status=lifecycle.status, error=e)

        lifecycle.accept()
        self._events.append(event)
        return EventSubmission(event=event, status=lifecycle.status)

    def add_event(self, event: GameEvent) -> GameEvent:
        """Register `event`, or raise without touching the registry.

        Raises:
            DuplicateConditionError: the condition collides with a registered event.
            InvalidEventError: the event is malformed.
        """

        submission = self._submit(event)
        if submission.error is not None:
            raise submission.error
        return event

    def register(self, *, kind: str, condition: Any) -> GameEvent:
        """Build a `GameEvent` from parts and register it.

        A bare integer condition is an instant.
        """

        try:
            event = GameEvent(kind=kind, condition=condition)
        except ValidationError as e:
            raise InvalidEventError({"kind": kind, "condition": condition}, reason=str(e)) from e
        return self.add_event(event)

    def add_events(self, events: Iterable[Any]) -> list[EventSubmission]:
        """Submit events in order without raising; one submission per input."""

        return [self._submit(e) for e in events]

    def get_event(self, instant: int) -> GameEvent | None:
        for event in self._events:
            if event.matches(instant):
                return event
        return None

    def require_event(self, instant: int) -> GameEvent:
        event = self.get_event(instant)
        if event is None:
            raise EventNotFoundError(instant)
        return event

    def conflicts_for(self, condition: Any) -> list[GameEvent]:
        """Registered events that would block `condition`, in insertion order."""

        return find_conflicts(self._events, as_condition(condition))
