# tests/generators/test_odd_one_out.py
"""Tests for OddOneOutGenerator."""

import pytest

from quizmultiplier.generators import OddOneOutGenerator
from quizmultiplier.generators.odd_one_out import ODD_ONE_OUT_SETS
from quizmultiplier.models import ALL_DIFFICULTIES, Difficulty


@pytest.fixture
def generator():
    return OddOneOutGenerator()


def _issues(generator, question):
    issues: list[str] = []
    generator.validate_by_type(question, issues, [])
    return issues


class TestOddOneOutGenerator:
    @pytest.mark.parametrize("difficulty", ALL_DIFFICULTIES)
    def test_index_tracks_odd_option_after_shuffle(
        self, generator, polity_fact, rng, difficulty
    ):
        question = generator.build_question(polity_fact, difficulty, rng)
        payload = question.payload

        sets = {category: (options, odd) for category, options, odd in ODD_ONE_OUT_SETS[difficulty]}
        options, odd = sets[payload.category]
        assert sorted(payload.options) == sorted(options)
        assert payload.options[payload.odd_one_index] == options[odd]
        assert question.explanation.correct_answer == f"{options[odd]} is the odd one out"
        assert _issues(generator, question) == []

    def test_variation_uses_public_law_set(self, generator, polity_fact, rng):
        (question,) = generator.build_variations(polity_fact, Difficulty.HARD, rng)
        payload = question.payload

        assert payload.category == "public law branches"
        assert payload.options[payload.odd_one_index] == "Criminal Law"
        assert _issues(generator, question) == []

    def test_out_of_range_index(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        payload = question.payload.model_copy(update={"odd_one_index": 4})
        issues = _issues(generator, question.model_copy(update={"payload": payload}))
        assert issues == ["Odd one index is out of range"]

    def test_unknown_category(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        payload = question.payload.model_copy(update={"category": "colours"})
        issues = _issues(generator, question.model_copy(update={"payload": payload}))
        assert issues == ["Use standard categorization for better clarity"]
