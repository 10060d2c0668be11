# Area: Source Tests
"""Tests for the Open Trivia DB question source."""

import asyncio

import aiohttp
import pytest

from trivia_engine.errors import SourceUnavailable
from trivia_engine.models import Difficulty
from trivia_engine.sources import OpenTDBQuestionSource, StaticQuestionSource


class FakeResponse:
    """Minimal stand-in for aiohttp's response context manager."""

    def __init__(self, status=200, payload=None, json_error=None):
        self.status = status
        self.payload = payload
        self.json_error = json_error

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def json(self, content_type=None):
        if self.json_error:
            raise self.json_error
        return self.payload


class FakeSession:
    """Records requests and returns canned responses."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def get(self, url, params=None):
        self.requests.append((url, params))
        if self.error:
            raise self.error
        return self.response


def entry(**overrides):
    data = {
        "type": "multiple",
        "difficulty": "hard",
        "category": "Entertainment: Japanese Anime &amp; Manga",
        "question": "In Yu-Gi-Oh, what book is Seto Kaiba seen reading?",
        "correct_answer": "Thus Spoke Zarathustra",
        "incorrect_answers": ["Beyond Good and Evil", "The Republic", "Meditations"],
    }
    data.update(overrides)
    return data


def fetch(session, **kwargs):
    source = OpenTDBQuestionSource(base_url="https://example.test/", session=session)
    return asyncio.run(source.fetch_questions(**kwargs))


class TestFetchQuestions:
    """Tests for OpenTDBQuestionSource.fetch_questions."""

    def test_request_parameters(self):
        """Test amount, type and category are sent to api.php."""
        session = FakeSession(FakeResponse(payload={"response_code": 0, "results": []}))
        fetch(session, count=2, category=31)
        assert session.requests == [
            ("https://example.test/api.php", {"amount": 2, "type": "multiple", "category": 31})
        ]

    def test_category_omitted_when_none(self):
        """Test no category parameter without a category."""
        session = FakeSession(FakeResponse(payload={"response_code": 0, "results": []}))
        fetch(session, count=2)
        assert "category" not in session.requests[0][1]

    def test_results_decoded_into_questions(self):
        """Test HTML entities are decoded and fields mapped."""
        payload = {"response_code": 0, "results": [
            entry(question="What is &quot;H&#039;2O&quot;?", difficulty="easy",
                  correct_answer="Water &amp; ice"),
        ]}
        (question,) = fetch(FakeSession(FakeResponse(payload=payload)), count=1)

        assert question.prompt == "What is \"H'2O\"?"
        assert question.correct_answer == "Water & ice"
        assert question.category == "Entertainment: Japanese Anime & Manga"
        assert question.difficulty == Difficulty.EASY
        assert len(question.distractors) == 3

    def test_invalid_entries_skipped(self):
        """Test entries failing validation are dropped."""
        payload = {"response_code": 0, "results": [
            entry(difficulty="extreme"),
            entry(),
        ]}
        questions = fetch(FakeSession(FakeResponse(payload=payload)), count=2)
        assert len(questions) == 1
        assert questions[0].difficulty == Difficulty.HARD

    def test_non_zero_response_code_raises(self):
        """Test API-level errors surface as SourceUnavailable."""
        session = FakeSession(FakeResponse(payload={"response_code": 5, "results": []}))
        with pytest.raises(SourceUnavailable, match="rate limited"):
            fetch(session, count=2)

    def test_http_error_status_raises(self):
        """Test a non-200 status surfaces as SourceUnavailable."""
        with pytest.raises(SourceUnavailable) as exc_info:
            fetch(FakeSession(FakeResponse(status=503)), count=2)
        assert exc_info.value.status == 503
        assert exc_info.value.source == "opentdb"

    def test_connection_error_wrapped(self):
        """Test aiohttp errors surface as SourceUnavailable."""
        session = FakeSession(error=aiohttp.ClientConnectionError("connection refused"))
        with pytest.raises(SourceUnavailable, match="connection refused"):
            fetch(session, count=2)

    def test_timeout_wrapped(self):
        """Test timeouts surface as SourceUnavailable."""
        with pytest.raises(SourceUnavailable):
            fetch(FakeSession(error=asyncio.TimeoutError()), count=2)

    def test_bad_json_wrapped(self):
        """Test an unparseable body surfaces as SourceUnavailable."""
        response = FakeResponse(json_error=ValueError("Expecting value"))
        with pytest.raises(SourceUnavailable):
            fetch(FakeSession(response), count=2)


class TestListCategories:
    """Tests for category listings."""

    def test_opentdb_categories(self):
        """Test api_category.php entries map id to decoded name."""
        payload = {"trivia_categories": [
            {"id": 9, "name": "General Knowledge"},
            {"id": 31, "name": "Entertainment: Japanese Anime &amp; Manga"},
        ]}
        session = FakeSession(FakeResponse(payload=payload))
        source = OpenTDBQuestionSource(session=session)

        categories = asyncio.run(source.list_categories())

        assert categories == {9: "General Knowledge", 31: "Entertainment: Japanese Anime & Manga"}
        assert session.requests[0][0] == "https://opentdb.com/api_category.php"

    @pytest.mark.parametrize("entries", [
        [{"name": "General Knowledge"}],
        [{"id": "nine", "name": "General Knowledge"}],
        ["General Knowledge"],
    ])
    def test_malformed_categories_raise(self, entries):
        """Test a bad category listing surfaces as SourceUnavailable."""
        session = FakeSession(FakeResponse(payload={"trivia_categories": entries}))
        with pytest.raises(SourceUnavailable, match="malformed category listing"):
            asyncio.run(OpenTDBQuestionSource(session=session).list_categories())

    def test_static_categories(self):
        """Test the built-in source lists only categories it has questions for."""
        categories = asyncio.run(StaticQuestionSource().list_categories())
        assert categories[22] == "Geography"
        assert 9 in categories


class TestStaticQuestionSource:
    """Tests for the built-in source."""

    def test_count_respected(self):
        """Test no more than count questions are returned."""
        assert len(asyncio.run(StaticQuestionSource().fetch_questions(2))) == 2

    def test_category_filter(self):
        """Test only questions of the category are returned."""
        questions = asyncio.run(StaticQuestionSource().fetch_questions(10, category=22))
        assert questions
        assert all(q.category == "Geography" for q in questions)

    def test_unknown_category_gives_nothing(self):
        """Test an unknown category id yields an empty batch."""
        assert asyncio.run(StaticQuestionSource().fetch_questions(5, category=999)) == []
