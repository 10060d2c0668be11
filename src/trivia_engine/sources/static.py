# Area: Sources
"""
trivia_engine.sources.static — Built-in question source
========================================================

Serves questions from memory. Used for offline demos and tests.
"""

import random
from typing import Dict, List, Optional, Sequence

from ..collaborators import QuestionSource
from ..models import Difficulty, Question

# Category ids follow Open Trivia DB numbering
CATEGORIES: Dict[int, str] = {
    9: "General Knowledge",
    17: "Science & Nature",
    22: "Geography",
    31: "Entertainment: Japanese Anime & Manga",
}

BUILTIN_QUESTIONS: List[Question] = [
    Question(category="Geography", difficulty=Difficulty.EASY,
             prompt="What is the capital of France?",
             correct_answer="Paris", distractors=("Lyon", "Nice", "Rome")),
    Question(category="Science & Nature", difficulty=Difficulty.MEDIUM,
             prompt="What is the chemical symbol for potassium?",
             correct_answer="K", distractors=("P", "Po", "Pt")),
    Question(category="General Knowledge", difficulty=Difficulty.EASY,
             prompt="How many sides does a hexagon have?",
             correct_answer="6", distractors=("5", "7", "8")),
    Question(category="Entertainment: Japanese Anime & Manga", difficulty=Difficulty.HARD,
             prompt=("In the first episode of Yu-Gi-Oh: Duel Monsters, what book is "
                     "Seto Kaiba seen reading at Domino High School?"),
             correct_answer="Thus Spoke Zarathustra",
             distractors=("Beyond Good and Evil", "The Republic", "Meditations")),
    Question(category="Geography", difficulty=Difficulty.MEDIUM,
             prompt="Which river flows through Budapest?",
             correct_answer="Danube", distractors=("Rhine", "Vistula", "Elbe")),
    Question(category="Science & Nature", difficulty=Difficulty.HARD,
             prompt="What is the most abundant gas in Earth's atmosphere?",
             correct_answer="Nitrogen", distractors=("Oxygen", "Argon", "Carbon Dioxide")),
]


class StaticQuestionSource(QuestionSource):
    """QuestionSource over a fixed list; optionally shuffled per fetch."""

    def __init__(self, questions: Optional[Sequence[Question]] = None,
                 shuffle: bool = False, rng: Optional[random.Random] = None):
        self.questions = list(BUILTIN_QUESTIONS if questions is None else questions)
        self.shuffle = shuffle
        self._rng = rng or random.Random()

    async def fetch_questions(self, count: int, category: Optional[int] = None) -> List[Question]:
        pool = self.questions
        if category is not None:
            name = CATEGORIES.get(category)
            pool = [q for q in pool if q.category == name]
        if self.shuffle:
            pool = self._rng.sample(pool, len(pool))
        return list(pool[:count])

    async def list_categories(self) -> Dict[int, str]:
        names = {q.category for q in self.questions}
        return {cid: name for cid, name in CATEGORIES.items() if name in names}
