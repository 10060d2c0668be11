# Area: Round
"""
trivia_engine._round.answer_set — Answer set builder
=====================================================

Turns a correct answer and three distractors into four labeled options
in uniformly random order.
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from ..errors import MalformedQuestion
from ..models import LABELS, AnswerOption, AnswerSet

DISTRACTOR_COUNT = len(LABELS) - 1


def shuffle_in_place(items: List, rng: random.Random) -> List:
    """Fisher–Yates shuffle: walk from the last index down, swapping with [0, i]."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items


def build_answer_set(
    correct_text: str,
    distractor_texts: Sequence[str],
    rng: Optional[random.Random] = None,
) -> AnswerSet:
    """
    Build the shuffled, labeled option set for one round.

    Args:
        correct_text: The correct answer
        distractor_texts: Exactly three wrong answers
        rng: Random source; defaults to the module-level generator

    Returns:
        AnswerSet with options labeled A–D and the correct label

    Raises:
        MalformedQuestion: If the distractor count is not three
    """
    distractors = list(distractor_texts)
    if len(distractors) != DISTRACTOR_COUNT:
        raise MalformedQuestion(
            f"expected {DISTRACTOR_COUNT} distractors, got {len(distractors)}",
            correct_text=correct_text,
            distractors=distractors,
        )

    choices = shuffle_in_place([correct_text] + distractors, rng or random)
    options = tuple(AnswerOption(label=label, text=text)
                    for label, text in zip(LABELS, choices))

    # Matched by content: a duplicate distractor may land ahead of the correct entry.
    correct_label = next(o.label for o in options if o.text == correct_text)
    return AnswerSet(options=options, correct_label=correct_label)
