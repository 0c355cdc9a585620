# src/quizmultiplier/engine/multiplication.py
"""MultiplicationEngine: expand one BaseFact into a deduplicated question set.

A run is a single pass pipeline:

1. Main pass: every subject-relevant type at all three difficulties, with
   negatives and variations switched on by the multiplication factor.
2. High-impact pass: the top ranked types, regenerated over temporal and
   comparative reframings of the fact.
3. Contextual pass: current-affairs, governance and international
   reframings, each routed to a small set of suitable types.
4. Deduplication, then optional scoring (``Settings.score_questions``).

Every generator call is an independent job. Jobs run concurrently under a
semaphore with a per-call timeout, and a failing job contributes zero
questions instead of aborting the run.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field

from quizmultiplier.analysis.scoring import score_questions
from quizmultiplier.engine.dedup import deduplicate
from quizmultiplier.engine.transforms import create_negative_versions, generate_variations
from quizmultiplier.generators.base import QuestionGenerator
from quizmultiplier.generators.exceptions import GenerationError, GenerationFailure
from quizmultiplier.generators.registry import create_generators
from quizmultiplier.models import (
    ALL_DIFFICULTIES,
    BaseFact,
    Difficulty,
    GenerationConfig,
    Question,
    QuestionType,
)
from quizmultiplier.policy import GenerationPolicy, round_half_up
from quizmultiplier.settings import Settings

logger = logging.getLogger(__name__)


# Reframed base facts


def _reframe(
    fact: BaseFact,
    suffix: str,
    content: str,
    concepts: Sequence[str],
    related_facts: Sequence[str],
) -> BaseFact:
    return fact.model_copy(
        update={
            "id": f"{fact.id}-{suffix}",
            "content": content,
            "concepts": (*fact.concepts, *concepts),
            "related_facts": (*fact.related_facts, *related_facts),
        }
    )


def temporal_variant(
    fact: BaseFact, markers: Sequence[str] = ("Article", "Amendment")
) -> BaseFact | None:
    """Constitutional-evolution reframing, only for facts citing an article or amendment."""
    if not any(marker in fact.content for marker in markers):
        return None
    return _reframe(
        fact,
        "temporal",
        f"Evolution of {fact.content} through constitutional amendments",
        ("constitutional evolution", "historical development"),
        ("constitutional history", "amendment process"),
    )


def comparative_variant(fact: BaseFact) -> BaseFact:
    return _reframe(
        fact,
        "comparative",
        f"Comparative analysis of {fact.content} with international practices",
        ("comparative analysis", "international comparison"),
        ("global practices", "constitutional comparison"),
    )


def current_affairs_context(fact: BaseFact) -> BaseFact:
    return _reframe(
        fact,
        "current",
        f"Contemporary application of {fact.content} in current governance challenges",
        ("current affairs", "contemporary relevance"),
        ("recent developments", "current challenges"),
    )


def governance_context(fact: BaseFact) -> BaseFact:
    return _reframe(
        fact,
        "governance",
        f"Implementation of {fact.content} in administrative governance",
        ("public administration", "policy implementation"),
        ("administrative efficiency", "governance challenges"),
    )


def international_context(fact: BaseFact) -> BaseFact:
    return _reframe(
        fact,
        "international",
        f"International implications of {fact.content}",
        ("international relations", "global perspective"),
        ("international law", "global governance"),
    )


CONTEXT_BUILDERS: dict[str, Callable[[BaseFact], BaseFact]] = {
    "current-affairs": current_affairs_context,
    "governance": governance_context,
    "international": international_context,
}


@dataclass(frozen=True)
class GenerationJob:
    """One generator call: a type, the pass or context that asked for it, and its config."""

    question_type: QuestionType
    context: str
    config: GenerationConfig


@dataclass
class MultiplicationResult:
    """Output of one multiplication run.

    Attributes:
        questions: Deduplicated questions in pass order.
        failures: Generator calls that raised or timed out.
        factor: The multiplication factor used for the main pass.
    """

    questions: list[Question]
    failures: list[GenerationFailure] = field(default_factory=list)
    factor: int = 0


class MultiplicationEngine:
    """Orchestrates the ten type generators over one BaseFact.

    Example:
        engine = MultiplicationEngine(settings=Settings(seed=42))
        questions = engine.multiply_from_base_fact(fact)

    Args:
        policy: Tuning tables (defaults to the built-in policy).
        settings: Concurrency, timeout and seed settings.
        generators: Generator per type; defaults to one of each from the registry.
    """

    def __init__(
        self,
        policy: GenerationPolicy | None = None,
        settings: Settings | None = None,
        generators: Mapping[QuestionType, QuestionGenerator] | None = None,
    ) -> None:
        self.policy = policy or GenerationPolicy.default()
        self.settings = settings or Settings()
        self.rng = random.Random(self.settings.seed)
        self.generators: dict[QuestionType, QuestionGenerator] = (
            dict(generators) if generators is not None else create_generators(self.policy)
        )

    # Planning

    def calculate_multiplication_factor(self, fact: BaseFact) -> int:
        """How aggressively to expand ``fact``: an integer within the policy bounds."""
        policy = self.policy
        factor = policy.importance_weight.get(fact.importance, 1.0)
        if len(fact.concepts) > policy.concept_threshold:
            factor *= policy.concept_bonus
        if len(fact.related_facts) > policy.related_facts_threshold:
            factor *= policy.related_facts_bonus
        factor *= policy.subject_weight.get(fact.subject, policy.default_subject_weight)
        return min(max(round_half_up(factor), policy.min_factor), policy.max_factor)

    def get_relevant_question_types(self, fact: BaseFact) -> list[QuestionType]:
        """All types minus the exclusions configured for the fact's subject."""
        excluded = set(self.policy.subject_exclusions.get(fact.subject, []))
        return [qt for qt in QuestionType if qt not in excluded]

    def get_high_impact_types(self, fact: BaseFact) -> list[QuestionType]:
        """Top ranked types after subject overrides; ties keep ranking-table order."""
        ranking = dict(self.policy.impact_ranking)
        ranking.update(self.policy.impact_overrides.get(fact.subject, {}))
        ordered = sorted(ranking, key=lambda qt: ranking[qt], reverse=True)
        return ordered[: self.policy.high_impact_count]

    def plan_main_pass(self, fact: BaseFact, factor: int) -> list[GenerationJob]:
        policy = self.policy
        return [
            GenerationJob(
                question_type,
                "main",
                GenerationConfig(
                    base_fact=fact,
                    question_types=(question_type,),
                    difficulties=ALL_DIFFICULTIES,
                    generate_negatives=factor > policy.negatives_above_factor,
                    include_variations=factor > policy.variations_above_factor,
                    max_questions_per_type=min(
                        factor * policy.per_type_factor_multiplier, policy.per_type_cap
                    ),
                ),
            )
            for question_type in self.get_relevant_question_types(fact)
        ]

    def plan_high_impact_pass(self, fact: BaseFact) -> list[GenerationJob]:
        policy = self.policy
        variants: list[tuple[str, BaseFact | None, Difficulty]] = [
            (
                "temporal",
                temporal_variant(fact, policy.temporal_markers),
                policy.temporal_difficulty,
            ),
            ("comparative", comparative_variant(fact), policy.comparative_difficulty),
        ]
        jobs = []
        for question_type in self.get_high_impact_types(fact):
            for context, variant, difficulty in variants:
                if variant is None:
                    continue
                jobs.append(
                    GenerationJob(
                        question_type,
                        context,
                        GenerationConfig(
                            base_fact=variant,
                            question_types=(question_type,),
                            difficulties=(difficulty,),
                            include_variations=True,
                            max_questions_per_type=policy.deep_variation_cap,
                        ),
                    )
                )
        return jobs

    def plan_contextual_pass(self, fact: BaseFact) -> list[GenerationJob]:
        policy = self.policy
        jobs = []
        for context, question_types in policy.context_types.items():
            builder = CONTEXT_BUILDERS.get(context)
            if builder is None:
                logger.warning("No reframing defined for context %r; skipped", context)
                continue
            variant = builder(fact)
            for question_type in question_types:
                jobs.append(
                    GenerationJob(
                        question_type,
                        context,
                        GenerationConfig(
                            base_fact=variant,
                            question_types=(question_type,),
                            difficulties=policy.context_difficulties,
                            max_questions_per_type=policy.context_cap,
                        ),
                    )
                )
        return jobs

    # Execution

    async def amultiply_with_report(self, fact: BaseFact) -> MultiplicationResult:
        """Run all three passes and deduplicate, keeping a record of failed calls.

        Never raises for generator failures: a failing or timed-out call is
        logged, recorded in ``failures`` and contributes zero questions.
        """
        factor = self.calculate_multiplication_factor(fact)
        jobs = [
            *self.plan_main_pass(fact, factor),
            *self.plan_high_impact_pass(fact),
            *self.plan_contextual_pass(fact),
        ]
        # Seeds are drawn in plan order so seeded runs do not depend on scheduling
        job_rngs = [random.Random(self.rng.getrandbits(64)) for _ in jobs]
        semaphore = asyncio.Semaphore(self.settings.max_concurrent_generations)

        results = await asyncio.gather(
            *(
                self._run_job(job, rng, semaphore)
                for job, rng in zip(jobs, job_rngs, strict=True)
            ),
            return_exceptions=True,
        )

        questions: list[Question] = []
        failures: list[GenerationFailure] = []
        for job, result in zip(jobs, results, strict=True):
            if isinstance(result, BaseException):
                failure = GenerationFailure(job.question_type, job.context, result)
                logger.warning("Failed to generate %s", failure.describe())
                failures.append(failure)
                continue
            questions.extend(result)

        unique = deduplicate(questions)
        if self.settings.score_questions:
            unique = score_questions(unique, self.policy)
        logger.debug(
            "Fact %s: factor %d, %d jobs, %d questions (%d after dedup), %d failures",
            fact.id,
            factor,
            len(jobs),
            len(questions),
            len(unique),
            len(failures),
        )
        return MultiplicationResult(questions=unique, failures=failures, factor=factor)

    async def _run_job(
        self, job: GenerationJob, rng: random.Random, semaphore: asyncio.Semaphore
    ) -> list[Question]:
        generator = self.generators.get(job.question_type)
        if generator is None:
            raise GenerationError(
                f"No generator configured for {job.question_type.value}",
                question_type=job.question_type,
                context=job.context,
            )
        async with semaphore:
            call = generator.agenerate(job.config, rng)
            timeout = self.settings.generation_timeout
            if timeout is None:
                return await call
            try:
                return await asyncio.wait_for(call, timeout)
            except asyncio.TimeoutError as e:
                raise GenerationError(
                    f"Timed out after {timeout}s",
                    question_type=job.question_type,
                    context=job.context,
                ) from e

    async def amultiply_from_base_fact(self, fact: BaseFact) -> list[Question]:
        """Generate the full question set for ``fact`` (async)."""
        result = await self.amultiply_with_report(fact)
        return result.questions

    def multiply_from_base_fact(self, fact: BaseFact) -> list[Question]:
        """Generate the full question set for ``fact``.

        Must not be called from a running event loop; use
        ``amultiply_from_base_fact`` there.
        """
        return asyncio.run(self.amultiply_from_base_fact(fact))

    def multiply_with_report(self, fact: BaseFact) -> MultiplicationResult:
        return asyncio.run(self.amultiply_with_report(fact))

    # Post-processing

    def generate_variations(self, question: Question) -> list[Question]:
        return generate_variations(question)

    def create_negative_versions(self, question: Question) -> list[Question]:
        return create_negative_versions(question)

    def deduplicate(self, questions: Sequence[Question]) -> list[Question]:
        return deduplicate(questions)
