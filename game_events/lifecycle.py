from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any

from statemachine import State, StateMachine

logger = logging.getLogger(__name__)


class EventStatus(StrEnum):
    proposed = "proposed"
    registered = "registered"
    rejected = "rejected"


class EventLifecycle(StateMachine):
    """Lifecycle of one submitted event.

    - proposed -> registered: accepted and permanently owned by the registry
    - proposed -> rejected: discarded, the registry is untouched
    Both outcomes are final; registered events are never updated or removed.
    """

    proposed = State(EventStatus.proposed.value, value=EventStatus.proposed.value, initial=True)
    registered = State(EventStatus.registered.value, value=EventStatus.registered.value, final=True)
    rejected = State(EventStatus.rejected.value, value=EventStatus.rejected.value, final=True)

    accept = proposed.to(registered)
    reject = proposed.to(rejected)

    def __init__(self, candidate: Any):
        self.candidate = candidate
        super().__init__()

    @property
    def status(self) -> EventStatus:
        return EventStatus(str(self.current_state.value))

    def on_enter_registered(self) -> None:
        logger.debug("Registered event %r", self.candidate)

    def on_enter_rejected(self) -> None:
        logger.debug("Rejected event %r", self.candidate)
