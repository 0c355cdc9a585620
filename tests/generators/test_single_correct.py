# tests/generators/test_single_correct.py
"""Tests for SingleCorrectMCQGenerator."""

import pytest

from quizmultiplier.generators import SingleCorrectMCQGenerator
from quizmultiplier.models import ALL_DIFFICULTIES, Difficulty, SingleCorrectPayload


@pytest.fixture
def generator():
    return SingleCorrectMCQGenerator()


def _issues(generator, question):
    issues: list[str] = []
    generator.validate_by_type(question, issues, [])
    return issues


class TestSingleCorrectMCQGenerator:
    @pytest.mark.parametrize("difficulty", ALL_DIFFICULTIES)
    def test_four_options_one_correct(self, generator, polity_fact, rng, difficulty):
        question = generator.build_question(polity_fact, difficulty, rng)

        assert isinstance(question.payload, SingleCorrectPayload)
        assert len(question.payload.options) == 4
        assert sum(option.is_correct for option in question.payload.options) == 1
        assert _issues(generator, question) == []

    def test_distractor_cites_neighbouring_article(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        texts = [option.text for option in question.payload.options]
        assert "Article 22 - Similar but different provision" in texts

    def test_explanation_covers_every_wrong_option(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.MEDIUM, rng)
        correct = next(o for o in question.payload.options if o.is_correct)

        assert question.explanation.correct_answer == correct.text
        assert len(question.explanation.why_others_wrong) == 3
        assert question.explanation.memory_trick == "Remember: 21 = Legal age, life begins"

    def test_negative_asks_for_unrelated_statement(self, generator, polity_fact, rng):
        (question,) = generator.build_negatives(polity_fact, Difficulty.EASY, rng)

        assert question.question_text == "Which of the following is NOT related to Right to Life?"
        correct = [o for o in question.payload.options if o.is_correct]
        assert len(correct) == 1
        assert "repealed" in correct[0].text
        assert _issues(generator, question) == []

    def test_variations(self, generator, polity_fact, rng):
        variations = generator.build_variations(polity_fact, Difficulty.MEDIUM, rng)

        assert len(variations) == 2
        assert "most applicable" in variations[0].question_text
        assert variations[1].question_text.startswith("The constitutional significance")

    def test_option_count_issue(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        payload = SingleCorrectPayload(options=question.payload.options[:3])
        issues = _issues(generator, question.model_copy(update={"payload": payload}))
        assert "Single correct MCQ must have exactly 4 options" in issues

    def test_correct_count_issue(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        options = tuple(o.model_copy(update={"is_correct": True}) for o in question.payload.options)
        issues = _issues(
            generator,
            question.model_copy(update={"payload": SingleCorrectPayload(options=options)}),
        )
        assert "Single correct MCQ must have exactly 1 correct option" in issues

    def test_duplicate_options_are_ambiguous(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        first = question.payload.options[0]
        options = (first, first.model_copy(update={"id": "opt-x"}), *question.payload.options[2:])
        question = question.model_copy(update={"payload": SingleCorrectPayload(options=options)})

        assert generator.has_multiple_valid_answers(question)
        assert generator.check_ambiguity(question) is False
