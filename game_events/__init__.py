"""Mutually exclusive game events bound to temporal conditions.

An event fires at a single instant, over a half-open range of instants, or at
a discrete set of instants. The registry refuses any event that could fire at
the same instant as one it already holds, so a point query has at most one
answer.

Quick start:
    >>> from game_events import EventRegistry, TimeRange
    >>> registry = EventRegistry()
    >>> _ = registry.register(kind="kickoff", condition=0)
    >>> _ = registry.register(kind="first_half", condition=TimeRange(x=1, y=45))
    >>> registry.get_event(10).kind
    'first_half'
"""

__version__ = "0.1.0"

from game_events.classifier import (
    classify,
    is_discrete_set,
    is_instant,
    is_range,
    is_valid_condition,
    is_valid_event,
)
from game_events.conditions import ConditionType, DiscreteSet, Instant, TemporalCondition, TimeRange
from game_events.errors import (
    ConfigurationError,
    DuplicateConditionError,
    EventNotFoundError,
    GameEventError,
    InvalidEventError,
)
from game_events.lifecycle import EventStatus
from game_events.models import GameEvent
from game_events.overlap import collides
from game_events.registry import EventRegistry, EventSubmission
from game_events.settings import RegistrySettings, configure_logging, settings_from_env

__all__ = [
    "ConditionType",
    "ConfigurationError",
    "DiscreteSet",
    "DuplicateConditionError",
    "EventNotFoundError",
    "EventRegistry",
    "EventStatus",
    "EventSubmission",
    "GameEvent",
    "GameEventError",
    "Instant",
    "InvalidEventError",
    "RegistrySettings",
    "TemporalCondition",
    "TimeRange",
    "__version__",
    "classify",
    "collides",
    "configure_logging",
    "is_discrete_set",
    "is_instant",
    "is_range",
    "is_valid_condition",
    "is_valid_event",
    "settings_from_env",
]
