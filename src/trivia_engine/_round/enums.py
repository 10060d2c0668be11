# Area: Round
"""
trivia_engine._round.enums — Round State Machine Enums
======================================================

Defines the states and events of a single trivia round.
"""

from enum import Enum


class RoundState(Enum):
    """
    States of one round.

    State transitions:
    PRESENTING -> COLLECTING (on PUBLISHED)
    COLLECTING -> CLOSED (on CLOCK_EXPIRED)
    PRESENTING -> CLOSED (on ABORTED)
    COLLECTING -> CLOSED (on ABORTED)
    """
    PRESENTING = "PRESENTING"
    COLLECTING = "COLLECTING"
    CLOSED = "CLOSED"


class RoundEvent(Enum):
    """
    Events that move a round forward.

    Events are triggered by:
    - PUBLISHED: the question message was published and is interactive
    - CLOCK_EXPIRED: the round clock fired (naturally or forced)
    - ABORTED: a collaborator failed or the question was malformed
    """
    PUBLISHED = "PUBLISHED"
    CLOCK_EXPIRED = "CLOCK_EXPIRED"
    ABORTED = "ABORTED"
