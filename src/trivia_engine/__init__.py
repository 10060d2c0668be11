"""
trivia_engine — Timed multiple-choice trivia rounds for chat platforms
=======================================================================

Quick Start (terminal, no chat platform needed):
    import asyncio
    from trivia_engine import TriviaSession, StaticQuestionSource, InMemoryScoreLedger
    from trivia_engine.demo import ConsoleSink

    session = TriviaSession(StaticQuestionSource(), ConsoleSink(), InMemoryScoreLedger())
    summary = asyncio.run(session.run(count=2))

Platform Integration:
    class MySink(PresentationSink): ...  # publish / edit / send_followup
    session = TriviaSession(OpenTDBQuestionSource(), MySink(), SqliteScoreLedger("scores.db"))
    # From the button handler:
    await session.submit(user_id, user_name, "B", handle=message_handle)

Each question is one round: presented with four shuffled options A-D,
open for a fixed window, then closed and scored. Every participant's
last submission counts; correct answers earn 5/10/20 points for
easy/medium/hard questions.
"""

from .collaborators import MessageHandle, PresentationSink, QuestionSource, ScoreLedger
from .config import DEFAULT_CONFIG, load_config
from .session import TriviaSession
from ._round import RoundOrchestrator, RoundState, build_answer_set, POINTS_BY_DIFFICULTY
from .ledgers import InMemoryScoreLedger, SqliteScoreLedger
from .sources import OpenTDBQuestionSource, StaticQuestionSource
from .errors import (
    TriviaEngineError,
    MalformedQuestion,
    SourceUnavailable,
    PresentationFailure,
    ScoringFailure,
    RoundClosed,
)
from .models import (
    Difficulty,
    Question,
    AnswerOption,
    AnswerSet,
    Submission,
    SubmissionReceipt,
    Award,
    RoundOutcome,
    SessionSummary,
)
from .types import MessageContent, OptionView

__all__ = [
    # Main classes
    "TriviaSession",
    "RoundOrchestrator",
    "RoundState",
    "build_answer_set",
    "POINTS_BY_DIFFICULTY",
    # Collaborators
    "MessageHandle",
    "PresentationSink",
    "QuestionSource",
    "ScoreLedger",
    "InMemoryScoreLedger",
    "SqliteScoreLedger",
    "OpenTDBQuestionSource",
    "StaticQuestionSource",
    # Config
    "DEFAULT_CONFIG",
    "load_config",
    # Errors
    "TriviaEngineError",
    "MalformedQuestion",
    "SourceUnavailable",
    "PresentationFailure",
    "ScoringFailure",
    "RoundClosed",
    # Models
    "Difficulty",
    "Question",
    "AnswerOption",
    "AnswerSet",
    "Submission",
    "SubmissionReceipt",
    "Award",
    "RoundOutcome",
    "SessionSummary",
    # Message types
    "MessageContent",
    "OptionView",
]

__version__ = "1.0.0"
