# src/quizmultiplier/generators/__init__.py
"""Question type generators for quizmultiplier."""

from quizmultiplier.generators.assertion_reasoning import AssertionReasoningGenerator
from quizmultiplier.generators.base import QuestionGenerator, determine_cognitive_level
from quizmultiplier.generators.case_study import CaseStudyBasedGenerator
from quizmultiplier.generators.data_based import DataBasedGenerator
from quizmultiplier.generators.exceptions import (
    ConfigurationError,
    GenerationError,
    GenerationFailure,
    PolicyError,
    QuizMultiplierError,
    UnsupportedQuestionTypeError,
)
from quizmultiplier.generators.map_based import MapBasedGenerator
from quizmultiplier.generators.match_the_following import MatchTheFollowingGenerator
from quizmultiplier.generators.multiple_correct import MultipleCorrectMCQGenerator
from quizmultiplier.generators.odd_one_out import OddOneOutGenerator
from quizmultiplier.generators.registry import (
    GENERATOR_CLASSES,
    create_generators,
    get_generator,
)
from quizmultiplier.generators.sequence_arrangement import SequenceArrangementGenerator
from quizmultiplier.generators.single_correct import SingleCorrectMCQGenerator
from quizmultiplier.generators.statement_based import StatementBasedGenerator

__all__ = [
    "QuestionGenerator",
    "determine_cognitive_level",
    "SingleCorrectMCQGenerator",
    "MultipleCorrectMCQGenerator",
    "MatchTheFollowingGenerator",
    "AssertionReasoningGenerator",
    "StatementBasedGenerator",
    "SequenceArrangementGenerator",
    "OddOneOutGenerator",
    "CaseStudyBasedGenerator",
    "MapBasedGenerator",
    "DataBasedGenerator",
    "GENERATOR_CLASSES",
    "create_generators",
    "get_generator",
    "QuizMultiplierError",
    "GenerationError",
    "ConfigurationError",
    "UnsupportedQuestionTypeError",
    "PolicyError",
    "GenerationFailure",
]
