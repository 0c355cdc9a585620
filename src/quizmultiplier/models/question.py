# src/quizmultiplier/models/question.py
"""Question data models.

A Question is a fully specified exam item. Its type-specific body lives in
``payload``, a discriminated union keyed by ``kind`` so that every question
carries exactly one payload shape.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Literal, Union
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class QuestionType(str, Enum):
    """The ten question archetypes."""

    SINGLE_CORRECT_MCQ = "SingleCorrectMCQ"
    MULTIPLE_CORRECT_MCQ = "MultipleCorrectMCQ"
    MATCH_THE_FOLLOWING = "MatchTheFollowing"
    ASSERTION_REASONING = "AssertionReasoning"
    STATEMENT_BASED = "StatementBased"
    SEQUENCE_ARRANGEMENT = "SequenceArrangement"
    ODD_ONE_OUT = "OddOneOut"
    CASE_STUDY_BASED = "CaseStudyBased"
    MAP_BASED = "MapBased"
    DATA_BASED = "DataBased"


class Difficulty(str, Enum):
    """Difficulty tiers, ordered from easiest to hardest."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


ALL_DIFFICULTIES: tuple[Difficulty, ...] = (Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD)

AssertionRelation = Literal[
    "both-true-reason-correct",
    "both-true-reason-incorrect",
    "assertion-true-reason-false",
    "assertion-false-reason-true",
    "both-false",
]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class QuestionOption(_Frozen):
    """A selectable option with its own rationale."""

    id: str
    text: str
    is_correct: bool
    explanation: str = ""


class MatchPair(_Frozen):
    left: str
    right: str
    explanation: str = ""


class Statement(_Frozen):
    number: int
    text: str
    is_correct: bool
    explanation: str = ""


# Payloads


class SingleCorrectPayload(_Frozen):
    kind: Literal["single_correct"] = "single_correct"
    options: tuple[QuestionOption, ...]


class MultipleCorrectPayload(_Frozen):
    kind: Literal["multiple_correct"] = "multiple_correct"
    options: tuple[QuestionOption, ...]
    correct_count: int


class MatchTheFollowingPayload(_Frozen):
    kind: Literal["match_the_following"] = "match_the_following"
    left_column: tuple[str, ...]
    right_column: tuple[str, ...]
    correct_pairs: tuple[MatchPair, ...]


class AssertionReasoningPayload(_Frozen):
    kind: Literal["assertion_reasoning"] = "assertion_reasoning"
    assertion: str
    reason: str
    correct_relation: AssertionRelation


class StatementBasedPayload(_Frozen):
    kind: Literal["statement_based"] = "statement_based"
    statements: tuple[Statement, ...]
    correct_combination: tuple[int, ...]


class SequenceArrangementPayload(_Frozen):
    kind: Literal["sequence_arrangement"] = "sequence_arrangement"
    items: tuple[str, ...]
    correct_sequence: tuple[int, ...]
    criterion: str  # "chronological", "hierarchical", ...


class OddOneOutPayload(_Frozen):
    kind: Literal["odd_one_out"] = "odd_one_out"
    options: tuple[str, ...]
    odd_one_index: int
    category: str


class CaseStudyPayload(_Frozen):
    kind: Literal["case_study"] = "case_study"
    passage: str
    questions: tuple[Question, ...]


class MapBasedPayload(_Frozen):
    kind: Literal["map_based"] = "map_based"
    map_description: str
    locations: tuple[str, ...]
    correct_location: str


class DataBasedPayload(_Frozen):
    kind: Literal["data_based"] = "data_based"
    data_source: str  # Table, graph or chart description
    interpretation_question: str
    options: tuple[QuestionOption, ...]


QuestionPayload = Annotated[
    Union[
        SingleCorrectPayload,
        MultipleCorrectPayload,
        MatchTheFollowingPayload,
        AssertionReasoningPayload,
        StatementBasedPayload,
        SequenceArrangementPayload,
        OddOneOutPayload,
        CaseStudyPayload,
        MapBasedPayload,
        DataBasedPayload,
    ],
    Field(discriminator="kind"),
]

PAYLOAD_KIND: dict[QuestionType, str] = {
    QuestionType.SINGLE_CORRECT_MCQ: "single_correct",
    QuestionType.MULTIPLE_CORRECT_MCQ: "multiple_correct",
    QuestionType.MATCH_THE_FOLLOWING: "match_the_following",
    QuestionType.ASSERTION_REASONING: "assertion_reasoning",
    QuestionType.STATEMENT_BASED: "statement_based",
    QuestionType.SEQUENCE_ARRANGEMENT: "sequence_arrangement",
    QuestionType.ODD_ONE_OUT: "odd_one_out",
    QuestionType.CASE_STUDY_BASED: "case_study",
    QuestionType.MAP_BASED: "map_based",
    QuestionType.DATA_BASED: "data_based",
}


class Explanation(_Frozen):
    """Pedagogical explanation bundle attached to every question."""

    correct_answer: str
    why_correct: str
    why_others_wrong: tuple[str, ...] = ()
    concept_clarity: str = ""
    memory_trick: str | None = None
    common_mistakes: tuple[str, ...] = ()
    related_pyqs: tuple[str, ...] = Field(default=(), alias="relatedPYQs")


class QuestionMetadata(_Frozen):
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    quality_score: int = Field(default=0, ge=0, le=100)
    pyq_similarity: int = Field(default=0, ge=0, le=100)
    high_yield_topic: bool = False
    difficulty_validated: bool = False
    factually_accurate: bool = True
    discrimination_index: float | None = Field(default=None, ge=0.0, le=1.0)


class Question(_Frozen):
    """A single generated exam question.

    Questions are immutable. Variations and negations are new Question
    objects with a new id.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    type: QuestionType
    question_text: str
    payload: QuestionPayload
    difficulty: Difficulty
    subject: str
    topic: str
    base_fact_id: str
    time_to_solve: int  # seconds
    marks: int
    concepts_tested: tuple[str, ...] = ()
    explanation: Explanation
    metadata: QuestionMetadata = Field(default_factory=QuestionMetadata)
    tags: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _payload_matches_type(self) -> Question:
        expected = PAYLOAD_KIND[self.type]
        if self.payload.kind != expected:
            raise ValueError(
                f"{self.type.value} question requires a '{expected}' payload, "
                f"got '{self.payload.kind}'"
            )
        return self


CaseStudyPayload.model_rebuild()
Question.model_rebuild()
