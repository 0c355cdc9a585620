# tests/generators/test_sequence_arrangement.py
"""Tests for SequenceArrangementGenerator."""

import random

import pytest

from quizmultiplier.generators import SequenceArrangementGenerator
from quizmultiplier.generators.sequence_arrangement import (
    SEQUENCE_SETS,
    answer_choices,
    base_criterion,
    format_sequence,
)
from quizmultiplier.models import ALL_DIFFICULTIES, Difficulty


@pytest.fixture
def generator():
    return SequenceArrangementGenerator()


def _issues(generator, question):
    issues: list[str] = []
    generator.validate_by_type(question, issues, [])
    return issues


def _ordered_items(payload):
    return [payload.items[number - 1] for number in payload.correct_sequence]


class TestSequenceArrangementGenerator:
    @pytest.mark.parametrize("difficulty", ALL_DIFFICULTIES)
    def test_sequence_recovers_correct_order(self, generator, polity_fact, rng, difficulty):
        question = generator.build_question(polity_fact, difficulty, rng)
        payload = question.payload

        known = {criterion: list(items) for criterion, items in SEQUENCE_SETS[difficulty]}
        assert _ordered_items(payload) == known[payload.criterion]
        assert f"{format_sequence(payload.correct_sequence)}" in question.question_text
        assert _issues(generator, question) == []

    def test_stem_lists_four_choices(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        for letter in "abcd":
            assert f"({letter}) " in question.question_text

    def test_reverse_variation(self, generator, polity_fact, rng):
        (question,) = generator.build_variations(polity_fact, Difficulty.MEDIUM, rng)
        payload = question.payload

        assert payload.criterion.startswith("reverse ")
        known = {
            criterion: list(items) for criterion, items in SEQUENCE_SETS[Difficulty.MEDIUM]
        }
        assert _ordered_items(payload) == known[base_criterion(payload.criterion)][::-1]
        assert _issues(generator, question) == []

    def test_answer_choices_are_distinct_and_include_answer(self):
        correct = (2, 4, 1, 3)
        choices = answer_choices(correct, random.Random(0))

        assert len(choices) == 4
        assert len(set(choices)) == 4
        assert sum(choice.endswith(" 2-4-1-3") for choice in choices) == 1

    def test_answer_choices_for_three_items(self):
        choices = answer_choices((1, 2, 3), random.Random(0))
        assert len(set(choices)) == 4

    def test_invalid_criterion(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        payload = question.payload.model_copy(update={"criterion": "alphabetical"})
        issues = _issues(generator, question.model_copy(update={"payload": payload}))
        assert issues == ["Invalid sequencing criterion"]

    def test_sequence_length_mismatch(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        payload = question.payload.model_copy(
            update={"correct_sequence": question.payload.correct_sequence[:3]}
        )
        issues = _issues(generator, question.model_copy(update={"payload": payload}))

        assert "Correct sequence length must match items length" in issues
        assert "Sequence numbers must be consecutive integers starting from 1" in issues
