"""Errors raised by the game event registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from game_events.models import GameEvent


class GameEventError(ValueError):
    """Base class for a rejected registry operation.

    Always recoverable: the registry is left exactly as it was.
    """


class DuplicateConditionError(GameEventError):
    """The candidate could fire at the same instant as an already registered event."""

    def __init__(self, event: GameEvent, conflicting: GameEvent) -> None:
        super().__init__(
            f"Event '{event.kind}' collides with registered event '{conflicting.kind}'"
        )
        self.event = event
        self.conflicting = conflicting


class InvalidEventError(GameEventError):
    """The candidate is malformed (empty kind, missing or ill-formed condition)."""

    def __init__(self, event: Any, reason: str) -> None:
        super().__init__(f"Invalid event: {reason}")
        self.event = event
        self.reason = reason


class EventNotFoundError(GameEventError, LookupError):
    def __init__(self, instant: int) -> None:
        super().__init__(f"No event registered at instant {instant}")
        self.instant = instant


class ConfigurationError(RuntimeError):
    """Raised when environment configuration is invalid."""
