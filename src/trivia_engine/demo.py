# Area: Demo
"""
trivia_engine.demo — Terminal collaborators for running without a chat platform
================================================================================

ConsoleSink prints every message to a text stream. DemoParticipants
plays a few simulated participants against the active round so that a
session can be watched end to end from the CLI.

Usage:
    session = TriviaSession(StaticQuestionSource(), ConsoleSink(), InMemoryScoreLedger())
    bots = DemoParticipants(session, count=3)
"""

import asyncio
import itertools
import logging
import random
import sys
from typing import Dict, List, Optional, TextIO, Tuple

from ._round.enums import RoundState
from .collaborators import MessageHandle, PresentationSink
from .errors import RoundClosed
from .models import LABELS
from .types import MessageContent

logger = logging.getLogger("trivia_engine.demo")

COLOR_CODES = {
    "green": "\033[32m",
    "red": "\033[31m",
    "blue": "\033[34m",
    "neutral": "",
}
RESET = "\033[0m"


def format_content(content: MessageContent) -> str:
    """Render a MessageContent as terminal text."""
    color = COLOR_CODES.get(content["color"], "")
    lines = [f"{color}{content['title']}{RESET if color else ''}", content["description"]]
    if content["options"]:
        buttons = []
        for option in content["options"]:
            mark = "✔ " if option["style"] == "success" else ""
            text = f"[{mark}{option['label']}: {option['text']}]"
            buttons.append(text if not option["disabled"] else f"~{text}~")
        lines.append("  ".join(buttons))
    if content["footer"]:
        lines.append(f"— {content['footer']}")
    return "\n".join(lines)


class ConsoleSink(PresentationSink):
    """PresentationSink that writes to a stream; keeps everything it sent."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self.messages: Dict[str, MessageContent] = {}
        self.followups: List[MessageContent] = []
        self._ids = itertools.count(1)

    async def publish(self, content: MessageContent) -> MessageHandle:
        handle = MessageHandle(message_id=f"msg-{next(self._ids)}", channel_id="console")
        self.messages[handle.message_id] = content
        self._write(content)
        return handle

    async def edit(self, handle: MessageHandle, content: MessageContent) -> None:
        if handle.message_id not in self.messages:
            raise KeyError(f"Unknown message {handle.message_id}")
        self.messages[handle.message_id] = content
        self._write(content, edited=True)

    async def send_followup(self, content: MessageContent) -> None:
        self.followups.append(content)
        self._write(content)

    def _write(self, content: MessageContent, edited: bool = False) -> None:
        prefix = "(edited) " if edited else ""
        print(f"\n{prefix}{format_content(content)}", file=self.stream, flush=True)


class DemoParticipants:
    """
    Simulated participants answering the session's active round.

    Each participant answers once at a random moment inside the window,
    picking the correct label with probability ``accuracy``. Some change
    their mind once, which exercises the last-submission-wins rule.
    """

    def __init__(self, session, count: int = 3, accuracy: float = 0.5,
                 rng: Optional[random.Random] = None, poll_seconds: float = 0.1):
        self.session = session
        self.players: List[Tuple[str, str]] = [
            (f"bot-{i}", f"Bot {i}") for i in range(1, count + 1)
        ]
        self.accuracy = accuracy
        self.poll_seconds = poll_seconds
        self._rng = rng or random.Random()

    async def play(self) -> None:
        """Run until cancelled."""
        seen = set()
        while True:
            round_ = self.session.active_round
            if (round_ is not None and round_.state == RoundState.COLLECTING
                    and id(round_) not in seen):
                seen.add(id(round_))
                await asyncio.gather(*(self._answer(round_, pid, name)
                                       for pid, name in self.players))
            await asyncio.sleep(self.poll_seconds)

    async def _answer(self, round_, participant_id: str, display_name: str) -> None:
        window = round_.clock.remaining()
        await asyncio.sleep(self._rng.uniform(0, window * 0.6))
        picks = [self._pick(round_.answer_set.correct_label)]
        if self._rng.random() < 0.25:
            picks.append(self._pick(round_.answer_set.correct_label))
        for label in picks:
            try:
                await round_.submit(participant_id, display_name, label, handle=round_.handle)
            except RoundClosed:
                logger.debug("%s was too late", display_name)
                return
            await asyncio.sleep(self._rng.uniform(0, window * 0.2))

    def _pick(self, correct_label: str) -> str:
        if self._rng.random() < self.accuracy:
            return correct_label
        return self._rng.choice([label for label in LABELS if label != correct_label])
