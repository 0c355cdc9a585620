# src/quizmultiplier/generators/registry.py
"""Registry mapping every QuestionType to its generator class."""

from __future__ import annotations

import random

from quizmultiplier.generators.assertion_reasoning import AssertionReasoningGenerator
from quizmultiplier.generators.base import QuestionGenerator
from quizmultiplier.generators.case_study import CaseStudyBasedGenerator
from quizmultiplier.generators.data_based import DataBasedGenerator
from quizmultiplier.generators.exceptions import ConfigurationError
from quizmultiplier.generators.map_based import MapBasedGenerator
from quizmultiplier.generators.match_the_following import MatchTheFollowingGenerator
from quizmultiplier.generators.multiple_correct import MultipleCorrectMCQGenerator
from quizmultiplier.generators.odd_one_out import OddOneOutGenerator
from quizmultiplier.generators.sequence_arrangement import SequenceArrangementGenerator
from quizmultiplier.generators.single_correct import SingleCorrectMCQGenerator
from quizmultiplier.generators.statement_based import StatementBasedGenerator
from quizmultiplier.models import QuestionType
from quizmultiplier.policy import GenerationPolicy

GENERATOR_CLASSES: dict[QuestionType, type[QuestionGenerator]] = {
    QuestionType.SINGLE_CORRECT_MCQ: SingleCorrectMCQGenerator,
    QuestionType.MULTIPLE_CORRECT_MCQ: MultipleCorrectMCQGenerator,
    QuestionType.MATCH_THE_FOLLOWING: MatchTheFollowingGenerator,
    QuestionType.ASSERTION_REASONING: AssertionReasoningGenerator,
    QuestionType.STATEMENT_BASED: StatementBasedGenerator,
    QuestionType.SEQUENCE_ARRANGEMENT: SequenceArrangementGenerator,
    QuestionType.ODD_ONE_OUT: OddOneOutGenerator,
    QuestionType.CASE_STUDY_BASED: CaseStudyBasedGenerator,
    QuestionType.MAP_BASED: MapBasedGenerator,
    QuestionType.DATA_BASED: DataBasedGenerator,
}


def _check_registry() -> None:
    missing = [qt.value for qt in QuestionType if qt not in GENERATOR_CLASSES]
    if missing:
        raise ConfigurationError(f"No generator registered for: {', '.join(missing)}")
    for question_type, cls in GENERATOR_CLASSES.items():
        if cls.question_type != question_type:
            raise ConfigurationError(
                f"{cls.__name__} is registered for {question_type.value} "
                f"but generates {cls.question_type.value}"
            )


# Fail at import time rather than mid-generation when a type has no generator
_check_registry()


def get_generator(
    question_type: QuestionType,
    policy: GenerationPolicy | None = None,
    rng: random.Random | None = None,
) -> QuestionGenerator:
    """Instantiate the generator for ``question_type``."""
    return GENERATOR_CLASSES[question_type](policy=policy, rng=rng)


def create_generators(
    policy: GenerationPolicy | None = None,
    rng: random.Random | None = None,
) -> dict[QuestionType, QuestionGenerator]:
    """One generator per question type, sharing a policy and random source."""
    return {qt: get_generator(qt, policy, rng) for qt in QuestionType}
