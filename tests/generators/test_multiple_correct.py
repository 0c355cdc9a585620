# tests/generators/test_multiple_correct.py
"""Tests for MultipleCorrectMCQGenerator."""

import pytest

from quizmultiplier.generators import MultipleCorrectMCQGenerator
from quizmultiplier.models import Difficulty, MultipleCorrectPayload


@pytest.fixture
def generator():
    return MultipleCorrectMCQGenerator()


def _issues(generator, question):
    issues: list[str] = []
    generator.validate_by_type(question, issues, [])
    return issues


class TestMultipleCorrectMCQGenerator:
    @pytest.mark.parametrize(
        ("difficulty", "expected"),
        [(Difficulty.EASY, 2), (Difficulty.MEDIUM, 3), (Difficulty.HARD, 2)],
    )
    def test_correct_count_by_difficulty(self, generator, polity_fact, rng, difficulty, expected):
        question = generator.build_question(polity_fact, difficulty, rng)
        payload = question.payload

        assert isinstance(payload, MultipleCorrectPayload)
        assert len(payload.options) == 4
        assert payload.correct_count == expected
        assert sum(o.is_correct for o in payload.options) == expected
        assert _issues(generator, question) == []

    def test_correct_answer_joins_correct_options(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        correct = [o.text for o in question.payload.options if o.is_correct]
        assert question.explanation.correct_answer == "; ".join(correct)

    def test_negative_inverts_options(self, generator, polity_fact, rng):
        (question,) = generator.build_negatives(polity_fact, Difficulty.MEDIUM, rng)
        payload = question.payload

        assert question.question_text == (
            "Which of the following statements about Right to Life are INCORRECT?"
        )
        assert payload.correct_count == 2
        correct_texts = [o.text for o in payload.options if o.is_correct]
        assert any("Article 22" in text for text in correct_texts)
        assert _issues(generator, question) == []

    def test_variation(self, generator, polity_fact, rng):
        (question,) = generator.build_variations(polity_fact, Difficulty.EASY, rng)
        assert question.question_text == (
            "Which statements about the implementation of Right to Life are accurate?"
        )

    def test_correct_count_mismatch(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        payload = question.payload.model_copy(update={"correct_count": 3})
        issues = _issues(generator, question.model_copy(update={"payload": payload}))
        assert issues == ["Correct count mismatch with actual correct options"]

    def test_too_many_correct(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        options = tuple(o.model_copy(update={"is_correct": True}) for o in question.payload.options)
        payload = MultipleCorrectPayload(options=options, correct_count=4)
        issues = _issues(generator, question.model_copy(update={"payload": payload}))
        assert "Multiple correct MCQ should have 2-3 correct options" in issues
