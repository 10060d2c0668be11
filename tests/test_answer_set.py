# Area: Round Tests
"""Tests for the answer set builder."""

import random
from collections import Counter

import pytest

from trivia_engine._round.answer_set import build_answer_set, shuffle_in_place
from trivia_engine.errors import MalformedQuestion
from trivia_engine.models import LABELS


class TestBuildAnswerSet:
    """Tests for build_answer_set."""

    def test_four_options_labeled_a_to_d(self):
        """Test that options carry labels A-D in order."""
        answer_set = build_answer_set("Paris", ["Lyon", "Nice", "Rome"])
        assert tuple(o.label for o in answer_set.options) == LABELS

    def test_all_texts_present_once(self):
        """Test the options are a permutation of the inputs."""
        answer_set = build_answer_set("Paris", ["Lyon", "Nice", "Rome"])
        assert sorted(o.text for o in answer_set.options) == ["Lyon", "Nice", "Paris", "Rome"]

    def test_correct_label_points_at_correct_text(self):
        """Test the correct label resolves to the correct answer."""
        for seed in range(20):
            answer_set = build_answer_set("Paris", ["Lyon", "Nice", "Rome"], random.Random(seed))
            assert answer_set.text_for(answer_set.correct_label) == "Paris"
            assert answer_set.correct_text == "Paris"

    def test_exactly_one_option_is_correct(self):
        """Test only one option holds the correct text."""
        answer_set = build_answer_set("Paris", ["Lyon", "Nice", "Rome"])
        assert sum(1 for o in answer_set.options if o.text == "Paris") == 1

    @pytest.mark.parametrize("distractors", [["Lyon", "Nice"], ["Lyon", "Nice", "Rome", "Lille"], []])
    def test_wrong_distractor_count_raises(self, distractors):
        """Test anything other than three distractors is malformed."""
        with pytest.raises(MalformedQuestion) as exc_info:
            build_answer_set("Paris", distractors)
        assert exc_info.value.correct_text == "Paris"
        assert exc_info.value.distractors == distractors

    def test_duplicate_of_correct_text_still_resolves(self):
        """Test a distractor equal to the correct text does not break labeling."""
        answer_set = build_answer_set("Paris", ["Paris", "Nice", "Rome"], random.Random(3))
        assert answer_set.correct_text == "Paris"

    def test_seeded_rng_is_deterministic(self):
        """Test the same seed gives the same ordering."""
        first = build_answer_set("Paris", ["Lyon", "Nice", "Rome"], random.Random(42))
        second = build_answer_set("Paris", ["Lyon", "Nice", "Rome"], random.Random(42))
        assert first == second

    def test_correct_position_is_roughly_uniform(self):
        """Test the correct answer lands on each label about a quarter of the time."""
        rng = random.Random(1234)
        runs = 4000
        counts = Counter(
            build_answer_set("Paris", ["Lyon", "Nice", "Rome"], rng).correct_label
            for _ in range(runs)
        )
        for label in LABELS:
            assert abs(counts[label] - runs / 4) < 150


class TestShuffleInPlace:
    """Tests for the Fisher-Yates helper."""

    def test_returns_same_list(self):
        """Test the list is shuffled in place and returned."""
        items = [1, 2, 3, 4]
        assert shuffle_in_place(items, random.Random(0)) is items
        assert sorted(items) == [1, 2, 3, 4]

    def test_single_item_unchanged(self):
        """Test a one-item list is left alone."""
        assert shuffle_in_place(["x"], random.Random(0)) == ["x"]
