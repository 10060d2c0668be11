# Area: Collaborators
"""
trivia_engine.collaborators — Interfaces the round engine depends on
=====================================================================

The engine owns the round lifecycle only. Questions, message delivery
and durable scores are provided by implementations of the three
abstract classes below. Submissions are pushed in by the platform
adapter through TriviaSession.submit / RoundOrchestrator.submit.

Reference implementations:

    from trivia_engine.sources import OpenTDBQuestionSource, StaticQuestionSource
    from trivia_engine.ledgers import InMemoryScoreLedger, SqliteScoreLedger
    from trivia_engine.demo import ConsoleSink
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .models import Question
from .types import MessageContent


@dataclass(frozen=True)
class MessageHandle:
    """Identity of a published message, used for later edits."""
    message_id: str
    channel_id: Optional[str] = None


class QuestionSource(ABC):
    """Delivers questions for a session."""

    @abstractmethod
    async def fetch_questions(
        self, count: int, category: Optional[int] = None
    ) -> List[Question]:
        """
        Return up to ``count`` questions, optionally from one category.

        Raises
        ------
        SourceUnavailable
            On network or API errors. The session is aborted; no retry.
        """
        ...

    async def list_categories(self) -> Dict[int, str]:
        """Return category id -> name. Sources without categories return {}."""
        return {}


class PresentationSink(ABC):
    """Publishes and edits messages in the chat channel."""

    @abstractmethod
    async def publish(self, content: MessageContent) -> MessageHandle:
        """Publish an interactive message and return its handle."""
        ...

    @abstractmethod
    async def edit(self, handle: MessageHandle, content: MessageContent) -> None:
        """Replace the content of a previously published message."""
        ...

    @abstractmethod
    async def send_followup(self, content: MessageContent) -> None:
        """Send a separate, non-interactive message."""
        ...


class ScoreLedger(ABC):
    """
    Durable per-participant point totals.

    Implementations clamp a participant's total at zero; the engine
    never checks this itself.
    """

    @abstractmethod
    async def award(self, participant_id: str, display_name: str, points: int) -> None:
        """Add ``points`` to the participant, creating them if unknown."""
        ...

    @abstractmethod
    async def get_score(self, participant_id: str) -> int:
        """Return the participant's total, or 0 if unknown."""
        ...

    async def get_all_scores(self) -> List[Dict[str, Any]]:
        """
        Return every participant with a total, in order of first award.

        Each entry has ``participant_id``, ``display_name`` and ``score``.
        Ledgers that cannot enumerate participants return [].
        """
        return []
