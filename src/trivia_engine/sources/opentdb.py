# Area: Sources
"""
trivia_engine.sources.opentdb — Open Trivia DB question source
===============================================================

Fetches multiple-choice questions and category listings from
https://opentdb.com. Text fields arrive HTML-encoded and are decoded
before the Question model is built.
"""

from __future__ import annotations

import asyncio
import html
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

import aiohttp
from pydantic import BaseModel, ValidationError

from ..collaborators import QuestionSource
from ..errors import SourceUnavailable
from ..models import Difficulty, Question

logger = logging.getLogger("trivia_engine.sources.opentdb")

RESPONSE_CODES = {
    1: "no results for the requested amount/category",
    2: "invalid parameter",
    3: "session token not found",
    4: "session token exhausted",
    5: "rate limited",
}


class OpenTDBResult(BaseModel):
    """One entry of the ``results`` array returned by api.php."""

    category: str
    type: str = "multiple"
    difficulty: Difficulty
    question: str
    correct_answer: str
    incorrect_answers: List[str]

    def to_question(self) -> Question:
        return Question(
            category=html.unescape(self.category),
            difficulty=self.difficulty,
            prompt=html.unescape(self.question),
            correct_answer=html.unescape(self.correct_answer),
            distractors=tuple(html.unescape(a) for a in self.incorrect_answers),
        )


class OpenTDBQuestionSource(QuestionSource):
    """
    QuestionSource backed by the Open Trivia DB HTTP API.

    Pass an existing ``aiohttp.ClientSession`` to share a connection
    pool; otherwise a short-lived session is opened per request.
    """

    name = "opentdb"

    def __init__(
        self,
        base_url: str = "https://opentdb.com",
        session: Optional[aiohttp.ClientSession] = None,
        timeout_seconds: float = 15,
    ):
        self.base_url = base_url.rstrip("/")
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds, connect=5)

    async def fetch_questions(
        self, count: int, category: Optional[int] = None
    ) -> List[Question]:
        params: Dict[str, Any] = {"amount": count, "type": "multiple"}
        if category is not None:
            params["category"] = category

        data = await self._get_json("/api.php", params)
        code = data.get("response_code")
        if code != 0:
            reason = RESPONSE_CODES.get(code, f"response_code {code}")
            raise SourceUnavailable(self.name, reason)

        questions: List[Question] = []
        for raw in data.get("results", []):
            try:
                questions.append(OpenTDBResult.model_validate(raw).to_question())
            except ValidationError as e:
                logger.warning("Skipping invalid question entry: %s", e.errors())
        logger.info("Fetched %d question(s) from Open Trivia DB", len(questions))
        return questions

    async def list_categories(self) -> Dict[int, str]:
        data = await self._get_json("/api_category.php")
        try:
            return {
                int(entry["id"]): html.unescape(entry["name"])
                for entry in data.get("trivia_categories", [])
            }
        except (KeyError, TypeError, ValueError) as e:
            raise SourceUnavailable(self.name, f"malformed category listing: {e!r}") from e

    async def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            async with self._session_scope() as session:
                async with session.get(url, params=params) as resp:
                    if resp.status != 200:
                        raise SourceUnavailable(self.name, f"HTTP {resp.status}", status=resp.status)
                    return await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise SourceUnavailable(self.name, str(e) or e.__class__.__name__) from e

    @asynccontextmanager
    async def _session_scope(self) -> AsyncIterator[aiohttp.ClientSession]:
        if self._session is not None:
            yield self._session
            return
        async with aiohttp.ClientSession(
            timeout=self._timeout,
            headers={"User-Agent": "trivia-engine/1.0"},
        ) as session:
            yield session
