# tests/generators/test_assertion_reasoning.py
"""Tests for AssertionReasoningGenerator."""

import pytest

from quizmultiplier.generators import AssertionReasoningGenerator
from quizmultiplier.generators.assertion_reasoning import RELATION_OPTIONS, VALID_RELATIONS
from quizmultiplier.models import ALL_DIFFICULTIES, Difficulty


@pytest.fixture
def generator():
    return AssertionReasoningGenerator()


def _issues(generator, question):
    issues: list[str] = []
    generator.validate_by_type(question, issues, [])
    return issues


class TestAssertionReasoningGenerator:
    @pytest.mark.parametrize("difficulty", ALL_DIFFICULTIES)
    def test_stem_presents_assertion_and_reason(self, generator, polity_fact, rng, difficulty):
        question = generator.build_question(polity_fact, difficulty, rng)
        payload = question.payload

        assert payload.correct_relation in VALID_RELATIONS
        assert f"Assertion (A): {payload.assertion}" in question.question_text
        assert f"Reason (R): {payload.reason}" in question.question_text
        for option in RELATION_OPTIONS.values():
            assert option in question.question_text
        assert question.explanation.correct_answer == RELATION_OPTIONS[payload.correct_relation]
        assert _issues(generator, question) == []

    def test_variation_reason_does_not_explain(self, generator, polity_fact, rng):
        (question,) = generator.build_variations(polity_fact, Difficulty.EASY, rng)

        assert question.payload.correct_relation == "both-true-reason-incorrect"
        assert question.payload.reason == "India follows a federal system of government"

    def test_short_assertion_issue(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        payload = question.payload.model_copy(update={"assertion": "Short"})
        issues = _issues(generator, question.model_copy(update={"payload": payload}))
        assert "Assertion is too short or missing" in issues

    def test_identical_assertion_and_reason_is_ambiguous(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        payload = question.payload.model_copy(update={"reason": question.payload.assertion})
        assert generator.has_multiple_valid_answers(
            question.model_copy(update={"payload": payload})
        )
