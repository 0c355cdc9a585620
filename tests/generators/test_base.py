# tests/generators/test_base.py
"""Tests for the shared generator loop, assembly and validation."""

import random

import pytest

from quizmultiplier.generators import (
    MultipleCorrectMCQGenerator,
    SingleCorrectMCQGenerator,
    UnsupportedQuestionTypeError,
    determine_cognitive_level,
)
from quizmultiplier.generators.base import build_options, has_duplicates, similar_source
from quizmultiplier.models import Difficulty, QuestionType


@pytest.fixture
def generator():
    return SingleCorrectMCQGenerator()


@pytest.fixture
def clean_question(generator, polity_fact, rng):
    """An easy SC question that passes every rule."""
    question = generator.build_question(polity_fact, Difficulty.EASY, rng)
    return question.model_copy(
        update={
            "question_text": "Which article deals with this?",
            "concepts_tested": ("Right to Life",),
        }
    )


class TestCognitiveLevel:
    def test_recall_is_default(self):
        assert determine_cognitive_level("What is Article 21?") == "recall"

    def test_analysis_wins_over_later_levels(self):
        assert determine_cognitive_level("Analyze how courts apply Article 21") == "analysis"

    def test_application(self):
        assert determine_cognitive_level("How does Article 21 protect privacy?") == "application"

    def test_evaluation(self):
        assert determine_cognitive_level("Critically evaluate the doctrine") == "evaluation"

    def test_synthesis(self):
        assert determine_cognitive_level("Propose a reform to the provision") == "synthesis"


class TestGenerate:
    def test_one_main_question_per_difficulty(self, generator, make_config, rng):
        config = make_config(QuestionType.SINGLE_CORRECT_MCQ)
        questions = generator.generate(config, rng)

        assert [q.difficulty for q in questions] == [
            Difficulty.EASY,
            Difficulty.MEDIUM,
            Difficulty.HARD,
        ]
        assert all(q.type == QuestionType.SINGLE_CORRECT_MCQ for q in questions)

    def test_extras_share_budget_after_main_questions(self, generator, make_config, rng):
        config = make_config(
            QuestionType.SINGLE_CORRECT_MCQ,
            generate_negatives=True,
            include_variations=True,
            max_questions_per_type=4,
        )
        questions = generator.generate(config, rng)

        assert len(questions) == 4
        assert [q.difficulty for q in questions] == [
            Difficulty.EASY,
            Difficulty.EASY,
            Difficulty.MEDIUM,
            Difficulty.HARD,
        ]
        assert "NOT related" in questions[1].question_text

    def test_main_questions_survive_small_cap(self, generator, make_config, rng):
        config = make_config(
            QuestionType.SINGLE_CORRECT_MCQ,
            generate_negatives=True,
            include_variations=True,
            max_questions_per_type=1,
        )
        assert len(generator.generate(config, rng)) == 3

    def test_cap_bounds_total(self, generator, make_config, rng):
        config = make_config(
            QuestionType.SINGLE_CORRECT_MCQ,
            generate_negatives=True,
            include_variations=True,
            max_questions_per_type=10,
        )
        assert len(generator.generate(config, rng)) == 10

    def test_unsupported_type(self, generator, make_config, rng):
        config = make_config(QuestionType.MAP_BASED)
        with pytest.raises(UnsupportedQuestionTypeError, match="does not support MapBased"):
            generator.generate(config, rng)

    def test_seeded_generation_is_reproducible(self, generator, make_config):
        config = make_config(QuestionType.SINGLE_CORRECT_MCQ, include_variations=True)
        first = generator.generate(config, random.Random(5))
        second = generator.generate(config, random.Random(5))

        assert [q.question_text for q in first] == [q.question_text for q in second]
        assert [
            [option.text for option in q.payload.options] for q in first
        ] == [[option.text for option in q.payload.options] for q in second]

    @pytest.mark.asyncio
    async def test_agenerate_matches_generate(self, generator, make_config):
        config = make_config(QuestionType.SINGLE_CORRECT_MCQ)
        sync = generator.generate(config, random.Random(3))
        async_ = await generator.agenerate(config, random.Random(3))

        assert [q.question_text for q in sync] == [q.question_text for q in async_]

    def test_supported_types(self, generator):
        assert generator.get_supported_types() == [QuestionType.SINGLE_CORRECT_MCQ]


class TestAssemble:
    def test_shared_fields(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.HARD, rng)

        assert question.subject == "Polity"
        assert question.topic == "Fundamental Rights"
        assert question.base_fact_id == "fr-21"
        assert question.time_to_solve == 45
        assert question.marks == 2
        assert question.concepts_tested[0] == "Right to Life"
        assert question.concepts_tested[1:] == polity_fact.concepts
        assert question.metadata.high_yield_topic is True

    def test_tags(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        assert question.tags[:4] == ("Polity", "Fundamental Rights", "SingleCorrectMCQ", "easy")
        assert "prelims" in question.tags

    def test_easy_solve_time(self, generator, polity_fact, rng):
        question = generator.build_question(polity_fact, Difficulty.EASY, rng)
        assert question.time_to_solve == 24

    def test_low_importance_is_not_high_yield(self, generator, history_fact, rng):
        question = generator.build_question(history_fact, Difficulty.EASY, rng)
        assert question.metadata.high_yield_topic is False


class TestValidateQuestion:
    def test_clean_question_scores_100(self, generator, clean_question):
        result = generator.validate_question(clean_question)

        assert result.is_valid
        assert result.quality_score == 100
        assert result.issues == []

    def test_short_text(self, generator, clean_question):
        question = clean_question.model_copy(update={"question_text": "Which?"})
        result = generator.validate_question(question)

        assert "Question text too short" in result.issues
        assert not result.is_valid
        assert result.quality_score == 80

    def test_missing_rationale(self, generator, clean_question):
        explanation = clean_question.explanation.model_copy(update={"why_others_wrong": ()})
        question = clean_question.model_copy(update={"explanation": explanation})
        result = generator.validate_question(question)

        assert result.issues == ["Missing explanations for incorrect options"]
        assert result.quality_score == 90

    def test_hedge_word_is_ambiguous(self, generator, clean_question):
        question = clean_question.model_copy(
            update={"question_text": "Which article usually deals with this?"}
        )
        result = generator.validate_question(question)

        assert result.ambiguity_free is False
        assert "Question contains ambiguous elements" in result.issues
        assert result.quality_score == 80

    def test_hedge_word_inside_other_word_is_not_ambiguous(self, generator, clean_question):
        question = clean_question.model_copy(
            update={"question_text": "Which article handsomely deals with this?"}
        )
        assert generator.validate_question(question).ambiguity_free is True

    def test_difficulty_mismatch(self, generator, clean_question):
        question = clean_question.model_copy(update={"time_to_solve": 90})
        result = generator.validate_question(question)

        assert result.difficulty_appropriate is False
        assert "Difficulty level inappropriate for content" in result.issues

    def test_type_mismatch(self, polity_fact, rng, generator):
        other = MultipleCorrectMCQGenerator().build_question(polity_fact, Difficulty.EASY, rng)
        result = generator.validate_question(other)
        assert "Question type mismatch" in result.issues

    def test_score_is_floored(self, generator, clean_question):
        explanation = clean_question.explanation.model_copy(
            update={"correct_answer": "", "why_others_wrong": ()}
        )
        question = clean_question.model_copy(
            update={
                "question_text": "Some?",
                "explanation": explanation,
                "time_to_solve": 200,
                "subject": "",
            }
        )
        result = generator.validate_question(question)
        assert result.quality_score == 0


class TestHelpers:
    def test_build_options_positional_ids(self):
        options = build_options([("A", True, "a"), ("B", False, "b")], random.Random(1))
        assert [option.id for option in options] == ["opt-1", "opt-2"]
        assert sorted(option.text for option in options) == ["A", "B"]

    def test_build_options_keeps_order_without_rng(self):
        options = build_options([("A", True, "a"), ("B", False, "b")])
        assert [option.text for option in options] == ["A", "B"]

    def test_similar_source(self):
        assert similar_source("Article 21") == "Article 22"
        assert similar_source("Preamble") is None

    def test_has_duplicates_ignores_case_and_whitespace(self):
        assert has_duplicates(["Writ ", "writ"])
        assert not has_duplicates(["Writ", "Right"])
