# Area: Round
"""
trivia_engine._round.state_machine — Round State Machine
========================================================

Tracks where a single round is in its lifecycle and rejects
out-of-order events such as a second close signal.
"""

import logging
from typing import Optional

from .enums import RoundState, RoundEvent

logger = logging.getLogger("trivia_engine.round_state")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    RoundState.PRESENTING: {
        RoundEvent.PUBLISHED: RoundState.COLLECTING,
        RoundEvent.ABORTED: RoundState.CLOSED,
    },
    RoundState.COLLECTING: {
        RoundEvent.CLOCK_EXPIRED: RoundState.CLOSED,
        RoundEvent.ABORTED: RoundState.CLOSED,
    },
    RoundState.CLOSED: {},
}


class RoundStateMachine:
    """
    State machine for one round.

    Attributes:
        current_state: The current state of the round
        closed_by: The event that closed the round, once closed
    """

    def __init__(self, round_number: Optional[int] = None):
        """Initialize in PRESENTING."""
        self.round_number = round_number
        self.current_state = RoundState.PRESENTING
        self.closed_by: Optional[RoundEvent] = None

    def can_transition(self, event: RoundEvent) -> bool:
        """Check if ``event`` is valid from the current state."""
        return event in TRANSITIONS.get(self.current_state, {})

    def transition(self, event: RoundEvent) -> RoundState:
        """
        Execute a state transition.

        Returns:
            The new state after transition

        Raises:
            ValueError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.value} from {self.current_state.value}"
            )

        next_state = TRANSITIONS[self.current_state][event]
        logger.info(
            "Round %s: %s → %s (%s)",
            self.round_number, self.current_state.value, next_state.value, event.value,
        )
        self.current_state = next_state
        if next_state == RoundState.CLOSED:
            self.closed_by = event
        return next_state

    @property
    def is_closed(self) -> bool:
        return self.current_state == RoundState.CLOSED
