# tests/generators/test_statement_based.py
"""Tests for StatementBasedGenerator."""

import random

import pytest

from quizmultiplier.generators import StatementBasedGenerator
from quizmultiplier.generators import statement_based
from quizmultiplier.generators.exceptions import GenerationError
from quizmultiplier.generators.statement_based import (
    answer_option,
    compose_stem,
    explain_statements,
    rationale_for_others,
    replace_choices,
)
from quizmultiplier.models import ALL_DIFFICULTIES, Difficulty, Statement


@pytest.fixture
def generator():
    return StatementBasedGenerator()


def _issues(generator, question):
    issues: list[str] = []
    generator.validate_by_type(question, issues, [])
    return issues


class TestAnswerOption:
    def test_two_statement_answers(self):
        assert answer_option((1,), 2) == "(a) 1 only"
        assert answer_option((2, 1), 2) == "(c) Both 1 and 2"
        assert answer_option((), 2) == "(d) Neither 1 nor 2"

    def test_three_statement_answers(self):
        assert answer_option((1, 2, 3), 3) == "(d) All of the above"
        assert answer_option((3,), 3) == "(c) 3 only"
        assert answer_option((), 3) == "(d) None of the above"

    def test_unlisted_combination_raises(self):
        with pytest.raises(GenerationError):
            answer_option((1, 2, 3, 4), 4)

    @pytest.mark.parametrize("combination", [(1,), (2,), (3,), (1, 2), (2, 3), (1, 3), (1, 2, 3)])
    def test_stem_always_offers_the_answer(self, combination):
        stem = compose_stem("Consider the following:", 3, combination)
        assert answer_option(combination, 3) in stem.splitlines()


class TestReplaceChoices:
    def test_switches_to_single_statement_choices(self):
        stem = compose_stem("Consider the following:", 3, (1, 3))

        replaced = replace_choices(stem, (2,), 3)

        assert replaced is not None
        assert replaced.startswith("Consider the following:")
        assert "(b) 2 only" in replaced.splitlines()
        assert "(a) 1 and 2 only" not in replaced

    def test_unknown_choice_list(self):
        assert replace_choices("Which of these is correct?\n(a) x\n(b) y", (1,), 2) is None


class TestStatementBasedGenerator:
    @pytest.mark.parametrize("difficulty", ALL_DIFFICULTIES)
    def test_combination_matches_true_statements(self, generator, polity_fact, rng, difficulty):
        question = generator.build_question(polity_fact, difficulty, rng)
        payload = question.payload

        assert len(payload.statements) == 2
        true_numbers = tuple(s.number for s in payload.statements if s.is_correct)
        assert payload.correct_combination == true_numbers
        assert "Which of the above statements is/are correct?" in question.question_text
        assert "(c) Both 1 and 2" in question.question_text
        assert _issues(generator, question) == []

    @pytest.mark.parametrize("difficulty", ALL_DIFFICULTIES)
    def test_negative_asks_for_incorrect_statements(
        self, generator, polity_fact, rng, difficulty
    ):
        (question,) = generator.build_negatives(polity_fact, difficulty, rng)
        payload = question.payload

        assert "Which of the above statements is/are incorrect?" in question.question_text
        assert payload.correct_combination
        chosen = set(payload.correct_combination)
        assert all(not s.is_correct for s in payload.statements if s.number in chosen)

    def test_negative_skipped_without_false_statement(
        self, generator, polity_fact, rng, monkeypatch
    ):
        all_true = (
            (
                Statement(number=1, text="The first statement holds", is_correct=True),
                Statement(number=2, text="The second statement holds", is_correct=True),
            ),
            (1, 2),
        )
        monkeypatch.setattr(statement_based, "statement_sets", lambda fact, difficulty: [all_true])

        assert generator.build_negatives(polity_fact, Difficulty.EASY, rng) == []

    @pytest.mark.parametrize("difficulty", ALL_DIFFICULTIES)
    def test_every_template_set_explains_the_alternatives(self, polity_fact, difficulty):
        for statements, combination in statement_based.statement_sets(polity_fact, difficulty):
            explanation = explain_statements(polity_fact, statements, combination)
            assert explanation.why_others_wrong

    @pytest.mark.parametrize("difficulty", ALL_DIFFICULTIES)
    @pytest.mark.parametrize("seed", range(4))
    def test_default_output_validates_cleanly(self, generator, polity_fact, difficulty, seed):
        question = generator.build_question(polity_fact, difficulty, random.Random(seed))
        result = generator.validate_question(question)
        assert "Missing explanations for incorrect options" not in result.issues

    def test_all_true_set_gets_summary_rationale(self):
        statements = (
            Statement(number=1, text="The first statement holds", is_correct=True, explanation="a"),
            Statement(number=2, text="The second one holds", is_correct=True, explanation="b"),
        )
        assert rationale_for_others(statements, (1, 2)) == [
            "All 2 statements hold, so every choice that leaves one out is wrong."
        ]
        assert rationale_for_others(statements, (1,)) == ["b"]

    def test_variation_adds_third_statement(self, generator, polity_fact, rng):
        (question,) = generator.build_variations(polity_fact, Difficulty.HARD, rng)
        payload = question.payload

        assert [s.number for s in payload.statements] == [1, 2, 3]
        assert 3 in payload.correct_combination
        assert "(d) All of the above" in question.question_text
        assert _issues(generator, question) == []

    def test_numbering_issue(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        statements = tuple(
            s.model_copy(update={"number": s.number + 1}) for s in question.payload.statements
        )
        payload = question.payload.model_copy(
            update={"statements": statements, "correct_combination": (2,)}
        )
        issues = _issues(generator, question.model_copy(update={"payload": payload}))
        assert "Statement numbering is incorrect" in issues

    def test_combination_references_missing_statement(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        payload = question.payload.model_copy(update={"correct_combination": (1, 5)})
        issues = _issues(generator, question.model_copy(update={"payload": payload}))
        assert "Correct combination references non-existent statements" in issues

    def test_single_statement_issue(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        payload = question.payload.model_copy(
            update={"statements": question.payload.statements[:1], "correct_combination": (1,)}
        )
        issues = _issues(generator, question.model_copy(update={"payload": payload}))
        assert "Must have at least 2 statements" in issues
