# tests/generators/test_match_the_following.py
"""Tests for MatchTheFollowingGenerator."""

import pytest

from quizmultiplier.generators import MatchTheFollowingGenerator
from quizmultiplier.generators.match_the_following import TIMELINE_PAIRS
from quizmultiplier.models import ALL_DIFFICULTIES, Difficulty


@pytest.fixture
def generator():
    return MatchTheFollowingGenerator()


def _issues(generator, question):
    issues: list[str] = []
    generator.validate_by_type(question, issues, [])
    return issues


class TestMatchTheFollowingGenerator:
    @pytest.mark.parametrize("difficulty", ALL_DIFFICULTIES)
    def test_five_pairs_with_permuted_right_column(self, generator, polity_fact, rng, difficulty):
        question = generator.build_question(polity_fact, difficulty, rng)
        payload = question.payload

        assert len(payload.correct_pairs) == 5
        assert payload.left_column == tuple(pair.left for pair in payload.correct_pairs)
        assert sorted(payload.right_column) == sorted(pair.right for pair in payload.correct_pairs)
        assert _issues(generator, question) == []

    def test_easy_pairs_cover_the_fact(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        pairs = {pair.left: pair.right for pair in question.payload.correct_pairs}

        assert pairs["Article 21"] == "Right to Life"
        assert "Article 22" in pairs
        assert "Article 20" in pairs

    def test_correct_answer_lists_pairs(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        assert "Article 21 → Right to Life" in question.explanation.correct_answer

    def test_no_negatives(self, generator, polity_fact, rng):
        assert generator.build_negatives(polity_fact, Difficulty.EASY, rng) == []

    def test_variation_uses_timeline(self, generator, polity_fact, rng):
        (question,) = generator.build_variations(polity_fact, Difficulty.MEDIUM, rng)
        assert question.payload.correct_pairs == TIMELINE_PAIRS
        assert "chronological periods" in question.question_text

    def test_missing_pair_issue(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.HARD, rng)
        payload = question.payload.model_copy(
            update={"correct_pairs": question.payload.correct_pairs[:4]}
        )
        issues = _issues(generator, question.model_copy(update={"payload": payload}))

        assert "Must have exactly 5 correct pairs" in issues
        assert "Some left column items have no matching pairs" in issues

    def test_duplicate_column_is_ambiguous(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.MEDIUM, rng)
        right = question.payload.right_column
        payload = question.payload.model_copy(update={"right_column": (right[0], *right[:4])})

        assert generator.has_multiple_valid_answers(
            question.model_copy(update={"payload": payload})
        )
