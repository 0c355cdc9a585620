# tests/engine/test_multiplication.py
"""Tests for MultiplicationEngine."""

import asyncio
import logging
import time
from unittest.mock import patch

import pytest

from quizmultiplier.engine import MultiplicationEngine, question_key
from quizmultiplier.engine.multiplication import (
    comparative_variant,
    governance_context,
    temporal_variant,
)
from quizmultiplier.generators import SingleCorrectMCQGenerator, create_generators
from quizmultiplier.generators.exceptions import GenerationError
from quizmultiplier.models import BaseFact, Difficulty, QuestionType
from quizmultiplier.policy import GenerationPolicy
from quizmultiplier.settings import Settings


class FailingGenerator(SingleCorrectMCQGenerator):
    def generate(self, config, rng=None):
        raise RuntimeError("template exploded")


class SlowGenerator(SingleCorrectMCQGenerator):
    async def agenerate(self, config, rng=None):
        await asyncio.sleep(1)
        return self.generate(config, rng)


class BlockingGenerator(SingleCorrectMCQGenerator):
    def generate(self, config, rng=None):
        time.sleep(0.3)
        return super().generate(config, rng)


def _engine_with(generator, **settings):
    generators = create_generators()
    generators[QuestionType.SINGLE_CORRECT_MCQ] = generator
    return MultiplicationEngine(settings=Settings(**settings), generators=generators)


@pytest.fixture
def engine():
    return MultiplicationEngine(settings=Settings(seed=42))


class TestMultiplicationFactor:
    def test_high_importance_polity_fact_hits_cap(self, engine, polity_fact):
        assert engine.calculate_multiplication_factor(polity_fact) == 15

    def test_medium_geography_fact(self, engine, geography_fact):
        assert engine.calculate_multiplication_factor(geography_fact) == 4

    def test_low_importance_uses_floor(self, engine, history_fact):
        fact = history_fact.model_copy(update={"subject": "Philosophy"})
        assert engine.calculate_multiplication_factor(fact) == 3

    def test_custom_bounds(self, polity_fact):
        engine = MultiplicationEngine(policy=GenerationPolicy(max_factor=10))
        assert engine.calculate_multiplication_factor(polity_fact) == 10


class TestPlanning:
    def test_relevant_types_exclude_by_subject(self, engine, geography_fact, history_fact):
        geography = engine.get_relevant_question_types(geography_fact)
        history = engine.get_relevant_question_types(history_fact)

        assert QuestionType.ASSERTION_REASONING not in geography
        assert len(geography) == 9
        assert QuestionType.MAP_BASED not in history
        assert QuestionType.DATA_BASED not in history

    def test_polity_high_impact_types(self, engine, polity_fact):
        assert engine.get_high_impact_types(polity_fact) == [
            QuestionType.SINGLE_CORRECT_MCQ,
            QuestionType.MULTIPLE_CORRECT_MCQ,
            QuestionType.CASE_STUDY_BASED,
            QuestionType.STATEMENT_BASED,
            QuestionType.ASSERTION_REASONING,
        ]

    def test_geography_high_impact_includes_maps(self, engine, geography_fact):
        assert QuestionType.MAP_BASED in engine.get_high_impact_types(geography_fact)

    def test_main_pass_switches_on_extras(self, engine, polity_fact):
        jobs = engine.plan_main_pass(polity_fact, 15)

        assert len(jobs) == 10
        config = jobs[0].config
        assert config.generate_negatives is True
        assert config.include_variations is True
        assert config.max_questions_per_type == 10

    def test_main_pass_for_small_factor(self, engine, history_fact):
        jobs = engine.plan_main_pass(history_fact, 3)
        config = jobs[0].config

        assert config.generate_negatives is False
        assert config.include_variations is False
        assert config.max_questions_per_type == 6

    def test_temporal_variant_needs_article_or_amendment(self, polity_fact):
        assert temporal_variant(polity_fact) is None

        cited = polity_fact.model_copy(update={"content": "Article 21 protects life"})
        variant = temporal_variant(cited)
        assert variant.id == "fr-21-temporal"
        assert "constitutional evolution" in variant.concepts

    def test_high_impact_pass_skips_missing_temporal(self, engine, polity_fact):
        jobs = engine.plan_high_impact_pass(polity_fact)

        assert len(jobs) == 5
        assert {job.context for job in jobs} == {"comparative"}
        assert all(job.config.max_questions_per_type == 2 for job in jobs)

    def test_contextual_pass(self, engine, polity_fact):
        jobs = engine.plan_contextual_pass(polity_fact)

        assert len(jobs) == 9
        assert {job.context for job in jobs} == {"current-affairs", "governance", "international"}
        assert all(job.config.max_questions_per_type == 1 for job in jobs)
        governance = [job for job in jobs if job.context == "governance"]
        assert governance[0].config.base_fact.id == "fr-21-governance"

    def test_reframings_keep_original_concepts(self, polity_fact):
        variant = comparative_variant(polity_fact)
        assert variant.concepts[: len(polity_fact.concepts)] == polity_fact.concepts
        assert variant.content.startswith("Comparative analysis of Right to Life")
        assert governance_context(polity_fact).related_facts[-1] == "governance challenges"


class TestMultiply:
    def test_produces_deduplicated_questions(self, engine, polity_fact):
        questions = engine.multiply_from_base_fact(polity_fact)

        keys = [question_key(q) for q in questions]
        assert questions
        assert len(keys) == len(set(keys))
        assert {q.type for q in questions} == set(QuestionType)

    def test_geography_fact_has_no_main_pass_assertion_reasoning(self, engine, geography_fact):
        result = engine.multiply_with_report(geography_fact)
        main_ar = [
            q
            for q in result.questions
            if q.type == QuestionType.ASSERTION_REASONING and q.base_fact_id == "geo-1"
        ]
        assert main_ar == []
        assert result.factor == 4

    def test_seeded_runs_are_reproducible(self, polity_fact):
        first = MultiplicationEngine(settings=Settings(seed=7)).multiply_from_base_fact(
            polity_fact
        )
        second = MultiplicationEngine(settings=Settings(seed=7)).multiply_from_base_fact(
            polity_fact
        )
        assert [q.question_text for q in first] == [q.question_text for q in second]

    def test_dedup_is_idempotent(self, engine, polity_fact):
        questions = engine.multiply_from_base_fact(polity_fact)
        assert engine.deduplicate(questions) == questions

    def test_base_fact_unchanged(self, engine, polity_fact):
        before = polity_fact.model_dump()
        engine.multiply_from_base_fact(polity_fact)
        assert polity_fact.model_dump() == before

    def test_scoring_when_enabled(self, polity_fact):
        engine = MultiplicationEngine(settings=Settings(seed=1, score_questions=True))
        questions = engine.multiply_from_base_fact(polity_fact)

        assert any(q.metadata.quality_score > 0 for q in questions)
        assert any(q.metadata.pyq_similarity > 0 for q in questions)

    def test_failing_generator_is_recorded(self, polity_fact, caplog):
        engine = _engine_with(FailingGenerator(), seed=3)
        with caplog.at_level(logging.WARNING, logger="quizmultiplier.engine.multiplication"):
            result = engine.multiply_with_report(polity_fact)

        assert result.questions
        assert all(q.type != QuestionType.SINGLE_CORRECT_MCQ for q in result.questions)
        assert {f.context for f in result.failures} == {"main", "comparative", "current-affairs"}
        assert all(f.question_type == QuestionType.SINGLE_CORRECT_MCQ for f in result.failures)
        assert result.failures[0].describe() == "SingleCorrectMCQ [main]: template exploded"
        assert "Failed to generate SingleCorrectMCQ [main]" in caplog.text

    def test_patched_generator_error(self, engine, polity_fact):
        generator = engine.generators[QuestionType.ODD_ONE_OUT]
        with patch.object(generator, "agenerate", side_effect=GenerationError("no template")):
            result = engine.multiply_with_report(polity_fact)

        (failure,) = result.failures
        assert failure.describe() == "OddOneOut [main]: no template"
        assert QuestionType.ODD_ONE_OUT not in {q.type for q in result.questions}

    def test_timeout_is_recorded(self, polity_fact):
        engine = _engine_with(SlowGenerator(), seed=3, generation_timeout=0.01)
        result = engine.multiply_with_report(polity_fact)

        assert len(result.failures) == 3
        assert str(result.failures[0].error) == "Timed out after 0.01s"
        assert result.questions

    def test_blocking_sync_generator_times_out(self, polity_fact):
        engine = _engine_with(BlockingGenerator(), seed=3, generation_timeout=0.05)
        result = engine.multiply_with_report(polity_fact)

        assert {failure.context for failure in result.failures} == {
            "main",
            "comparative",
            "current-affairs",
        }
        assert all(str(f.error) == "Timed out after 0.05s" for f in result.failures)
        assert QuestionType.SINGLE_CORRECT_MCQ not in {q.type for q in result.questions}
        assert result.questions

    @pytest.mark.asyncio
    async def test_blocking_generator_leaves_event_loop_free(self, polity_fact):
        engine = _engine_with(BlockingGenerator(), seed=3, generation_timeout=5)
        ticks = 0
        done = asyncio.Event()

        async def tick():
            nonlocal ticks
            while not done.is_set():
                ticks += 1
                await asyncio.sleep(0.01)

        ticker = asyncio.create_task(tick())
        result = await engine.amultiply_with_report(polity_fact)
        done.set()
        await ticker

        assert result.failures == []
        assert ticks > 5

    def test_missing_generator_is_a_failure(self, polity_fact):
        generators = create_generators()
        del generators[QuestionType.MAP_BASED]
        engine = MultiplicationEngine(settings=Settings(seed=3), generators=generators)
        result = engine.multiply_with_report(polity_fact)

        (failure,) = result.failures
        assert failure.describe() == "MapBased [main]: No generator configured for MapBased"

    @pytest.mark.asyncio
    async def test_async_entry_point(self, polity_fact):
        engine = MultiplicationEngine(settings=Settings(seed=5, max_concurrent_generations=2))
        questions = await engine.amultiply_from_base_fact(polity_fact)
        assert questions

    def test_sparse_fact(self, engine):
        fact = BaseFact(
            id="bare",
            subject="Ethics",
            topic="Integrity",
            content="Integrity in public life",
            source="Nolan Principles",
            importance="low",
        )
        result = engine.multiply_with_report(fact)

        assert result.factor == 3
        assert result.failures == []
        assert result.questions


class TestPostProcessing:
    def test_engine_variations_and_negatives(self, engine, polity_fact, rng):
        question = SingleCorrectMCQGenerator().build_negatives(
            polity_fact, Difficulty.MEDIUM, rng
        )[0]

        assert len(engine.generate_variations(question)) == 5
        negatives = engine.create_negative_versions(question)
        assert [n.id for n in negatives] == [f"{question.id}-not", f"{question.id}-except"]
