# Area: Round
"""
trivia_engine._round.render — Message content builders
======================================================

Builds the abstract MessageContent dicts for each step of a round and
for session notices. No platform formatting happens here.
"""

from typing import Iterable, List, Optional

from ..models import AnswerSet, Question, RoundOutcome, SessionSummary
from ..types import MessageContent, OptionView


def _option_views(answer_set: AnswerSet, closed: bool) -> List[OptionView]:
    views: List[OptionView] = []
    for option in answer_set.options:
        correct = closed and option.label == answer_set.correct_label
        views.append({
            "label": option.label,
            "text": option.text,
            "style": "success" if correct else "secondary",
            "disabled": closed,
        })
    return views


def _question_footer(question: Question, window_seconds: float,
                     participants: Optional[int]) -> str:
    footer = f"{question.category} · {question.difficulty.value}\nYou have {window_seconds:g}s to answer."
    if participants is not None:
        footer += f"\n{participants} answered so far."
    return footer


def render_question(
    question: Question,
    answer_set: AnswerSet,
    round_number: int,
    window_seconds: float,
    total_rounds: Optional[int] = None,
    participants: Optional[int] = None,
) -> MessageContent:
    """Interactive question message with enabled options."""
    position = f"{round_number}/{total_rounds}" if total_rounds else f"{round_number}"
    choices = "\n\n".join(f"**{o.label}** {o.text}" for o in answer_set.options)
    return {
        "title": f"Question {position}:\n{question.prompt}",
        "description": f"**Choices:**\n\n{choices}",
        "options": _option_views(answer_set, closed=False),
        "footer": _question_footer(question, window_seconds, participants),
        "color": "blue",
    }


def render_closed_question(
    question: Question,
    answer_set: AnswerSet,
    round_number: int,
    total_rounds: Optional[int] = None,
) -> MessageContent:
    """The question message after close: options disabled, correct one highlighted."""
    position = f"{round_number}/{total_rounds}" if total_rounds else f"{round_number}"
    choices = "\n\n".join(f"**{o.label}** {o.text}" for o in answer_set.options)
    return {
        "title": f"Question {position}:\n{question.prompt}",
        "description": f"**Choices:**\n\n{choices}",
        "options": _option_views(answer_set, closed=True),
        "footer": f"{question.category} · time is up",
        "color": "neutral",
    }


def render_results(outcome: RoundOutcome) -> MessageContent:
    """Follow-up message reporting the correct answer and who scored."""
    answer = f"**{outcome.correct_label}: {outcome.correct_text}**"
    if outcome.nobody_answered:
        return {
            "title": "Nobody answered.",
            "description": f"The good answer was: {answer}",
            "options": [],
            "footer": None,
            "color": "red",
        }
    if not outcome.awards:
        return {
            "title": "Nobody got it right.",
            "description": (
                f"The good answer was: {answer}\n"
                f"{outcome.submissions_count} answer(s), none correct."
            ),
            "options": [],
            "footer": None,
            "color": "red",
        }
    winners = "\n".join(
        f"• {a.display_name} +{a.points}" for a in outcome.awards
    )
    return {
        "title": "Correct!",
        "description": (
            f"It was indeed {answer}\n\n{winners}\n\n"
            f"{len(outcome.awards)}/{outcome.submissions_count} answered correctly."
        ),
        "options": [],
        "footer": f"{outcome.difficulty.value}: {outcome.score_awarded} points",
        "color": "green",
    }


def render_notice(title: str, description: str) -> MessageContent:
    """Plain user-visible notice, used for aborted rounds and sessions."""
    return {
        "title": title,
        "description": description,
        "options": [],
        "footer": None,
        "color": "red",
    }


def render_summary(summary: SessionSummary) -> MessageContent:
    """End-of-session message listing the points each participant earned."""
    lines: Iterable[str] = (
        f"• {name}: {points} points"
        for name, points in summary.points_by_participant.values()
    )
    body = "\n".join(lines) or "No points were awarded this time."
    footer = f"{summary.rounds_played} question(s) played"
    if summary.rounds_failed:
        footer += f", {summary.rounds_failed} skipped"
    return {
        "title": "Trivia finished!",
        "description": body,
        "options": [],
        "footer": footer,
        "color": "blue",
    }
