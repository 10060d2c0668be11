# Area: Demo Tests
"""Tests for the terminal sink and simulated participants."""

import asyncio
import io
import random

import pytest

from trivia_engine.collaborators import MessageHandle
from trivia_engine.demo import ConsoleSink, DemoParticipants, format_content
from trivia_engine.ledgers import InMemoryScoreLedger
from trivia_engine.session import TriviaSession
from trivia_engine.sources import BUILTIN_QUESTIONS, StaticQuestionSource


def notice(title="Hello"):
    return {"title": title, "description": "body", "options": [], "footer": None,
            "color": "neutral"}


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_publish_assigns_increasing_ids(self):
        """Test each published message gets a new handle."""
        sink = ConsoleSink(io.StringIO())

        async def scenario():
            return await sink.publish(notice()), await sink.publish(notice())

        first, second = asyncio.run(scenario())
        assert first.message_id == "msg-1"
        assert second.message_id == "msg-2"

    def test_output_written_to_stream(self):
        """Test messages are printed to the configured stream."""
        stream = io.StringIO()
        sink = ConsoleSink(stream)
        asyncio.run(sink.send_followup(notice("Trivia finished!")))
        assert "Trivia finished!" in stream.getvalue()
        assert len(sink.followups) == 1

    def test_edit_unknown_message_raises(self):
        """Test editing a message that was never published fails."""
        sink = ConsoleSink(io.StringIO())
        with pytest.raises(KeyError):
            asyncio.run(sink.edit(MessageHandle("msg-9"), notice()))

    def test_format_marks_correct_and_disabled(self):
        """Test closed options are struck through and the correct one ticked."""
        content = notice()
        content["options"] = [
            {"label": "A", "text": "Lyon", "style": "secondary", "disabled": True},
            {"label": "B", "text": "Paris", "style": "success", "disabled": True},
        ]
        text = format_content(content)
        assert "~[A: Lyon]~" in text
        assert "~[✔ B: Paris]~" in text


class TestDemoParticipants:
    """Tests for simulated participants."""

    def test_accurate_bots_score(self):
        """Test bots that always answer correctly are all awarded."""
        ledger = InMemoryScoreLedger()
        session = TriviaSession(
            StaticQuestionSource([BUILTIN_QUESTIONS[0]]),
            ConsoleSink(io.StringIO()),
            ledger,
            {"answer_window_seconds": 0.3, "pacing_seconds": 0},
        )
        bots = DemoParticipants(session, count=2, accuracy=1.0,
                                rng=random.Random(7), poll_seconds=0.005)

        async def scenario():
            bot_task = asyncio.create_task(bots.play())
            try:
                return await session.run(count=1)
            finally:
                bot_task.cancel()

        summary = asyncio.run(scenario())
        assert summary.points_by_participant == {"bot-1": ("Bot 1", 5), "bot-2": ("Bot 2", 5)}
