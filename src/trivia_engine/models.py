# Area: Round
"""
trivia_engine.models — Round data model
========================================

Question data arrives from external sources and is validated with
pydantic. Everything the engine derives during a round (answer sets,
submissions, outcomes) is a frozen dataclass owned by the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator


LABELS: Tuple[str, ...] = ("A", "B", "C", "D")


class Difficulty(str, Enum):
    """Difficulty tier reported by the question source."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Question(BaseModel):
    """
    One trivia question, immutable for the lifetime of a round.

    The distractor count is not checked here; the answer set builder
    rejects anything other than three so that a bad entry only costs
    its own round.
    """

    model_config = ConfigDict(frozen=True)

    category: str
    difficulty: Difficulty
    prompt: str
    correct_answer: str
    distractors: Tuple[str, ...]

    @field_validator("prompt", "correct_answer")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


@dataclass(frozen=True)
class AnswerOption:
    """A labeled choice shown to participants."""
    label: str
    text: str


@dataclass(frozen=True)
class AnswerSet:
    """Shuffled options for one round plus the label holding the correct text."""
    options: Tuple[AnswerOption, ...]
    correct_label: str

    @property
    def correct_text(self) -> str:
        return self.text_for(self.correct_label)

    def text_for(self, label: str) -> str:
        for option in self.options:
            if option.label == label:
                return option.text
        raise KeyError(label)


@dataclass(frozen=True)
class Submission:
    """A participant's current choice within one round."""
    participant_id: str
    display_name: str
    label: str
    submitted_at: datetime


@dataclass(frozen=True)
class SubmissionReceipt:
    """Returned to the caller of a submission."""
    is_first_submission: bool
    total_distinct_participants: int


@dataclass(frozen=True)
class Award:
    """Points granted to one correct submitter."""
    participant_id: str
    display_name: str
    points: int


@dataclass(frozen=True)
class RoundOutcome:
    """
    Result of a closed round, computed once at close.

    Attributes:
        round_number: 1-based position of the round in its session
        correct_label: Label of the correct option
        correct_text: Text of the correct option
        difficulty: Difficulty tier of the question
        score_awarded: Points granted per correct submission
        awards: One entry per correct submitter
        submissions_count: Number of distinct participants who answered
    """

    round_number: int
    correct_label: str
    correct_text: str
    difficulty: Difficulty
    score_awarded: int
    awards: Tuple[Award, ...] = ()
    submissions_count: int = 0

    @property
    def nobody_answered(self) -> bool:
        return self.submissions_count == 0


@dataclass
class SessionSummary:
    """
    What a finished (or aborted) session reports.

    points_by_participant keeps insertion order of the first award and
    maps participant id to (display name, points earned this session).
    """

    rounds_played: int = 0
    rounds_failed: int = 0
    aborted: bool = False
    abort_reason: Optional[str] = None
    points_by_participant: Dict[str, Tuple[str, int]] = field(default_factory=dict)

    def add_outcome(self, outcome: RoundOutcome) -> None:
        self.rounds_played += 1
        for award in outcome.awards:
            _, earned = self.points_by_participant.get(award.participant_id, ("", 0))
            self.points_by_participant[award.participant_id] = (
                award.display_name, earned + award.points,
            )
