# Area: Round
"""
Round scoring policy
====================

Fixed points per difficulty tier and the reconciliation of a closed
submission snapshot against the correct label.
"""

from typing import Dict, Sequence

from ..models import AnswerSet, Award, Difficulty, RoundOutcome, Submission

POINTS_BY_DIFFICULTY: Dict[Difficulty, int] = {
    Difficulty.EASY: 5,
    Difficulty.MEDIUM: 10,
    Difficulty.HARD: 20,
}


def points_for(difficulty: Difficulty) -> int:
    return POINTS_BY_DIFFICULTY[difficulty]


def compute_outcome(
    round_number: int,
    answer_set: AnswerSet,
    difficulty: Difficulty,
    submissions: Sequence[Submission],
) -> RoundOutcome:
    """Build the outcome of a closed round; every correct submitter gets the tier's points."""
    points = points_for(difficulty)
    awards = tuple(
        Award(participant_id=s.participant_id, display_name=s.display_name, points=points)
        for s in submissions
        if s.label == answer_set.correct_label
    )
    return RoundOutcome(
        round_number=round_number,
        correct_label=answer_set.correct_label,
        correct_text=answer_set.correct_text,
        difficulty=difficulty,
        score_awarded=points,
        awards=awards,
        submissions_count=len(submissions),
    )
