# Area: Round
"""
Round engine — one question from presentation to results.

This package handles:
- Answer set building and shuffling
- Per-round submission ledger
- The collection window clock
- Round state machine and orchestration
"""

from .enums import RoundState, RoundEvent
from .answer_set import build_answer_set
from .submission_ledger import SubmissionLedger
from .clock import RoundClock
from .state_machine import RoundStateMachine
from .scoring import POINTS_BY_DIFFICULTY, compute_outcome
from .orchestrator import RoundOrchestrator

__all__ = [
    "RoundState",
    "RoundEvent",
    "build_answer_set",
    "SubmissionLedger",
    "RoundClock",
    "RoundStateMachine",
    "POINTS_BY_DIFFICULTY",
    "compute_outcome",
    "RoundOrchestrator",
]
