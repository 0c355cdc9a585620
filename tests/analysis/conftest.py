# tests/analysis/conftest.py
"""Fixtures for building questions with hand-picked features."""

import pytest

from quizmultiplier.models import (
    CaseStudyPayload,
    Difficulty,
    Explanation,
    Question,
    QuestionOption,
    QuestionType,
    SingleCorrectPayload,
)


def _default_payload(question_type):
    if question_type == QuestionType.CASE_STUDY_BASED:
        return CaseStudyPayload(passage="A passage.", questions=())
    return SingleCorrectPayload(
        options=(
            QuestionOption(id="opt-1", text="Delhi", is_correct=True),
            QuestionOption(id="opt-2", text="Mumbai", is_correct=False),
        )
    )


@pytest.fixture
def make_question():
    """Build a Question; keyword arguments override the easy SC defaults."""

    def _make(clarity="", **overrides):
        question_type = overrides.setdefault("type", QuestionType.SINGLE_CORRECT_MCQ)
        overrides.setdefault("payload", _default_payload(question_type))
        fields = {
            "question_text": "What is the capital?",
            "difficulty": Difficulty.EASY,
            "subject": "Polity",
            "topic": "Fundamental Rights",
            "base_fact_id": "fr-21",
            "time_to_solve": 20,
            "marks": 1,
            "concepts_tested": ("capital",),
            "explanation": Explanation(
                correct_answer="Delhi", why_correct="Delhi is the capital", concept_clarity=clarity
            ),
        }
        fields.update(overrides)
        return Question(**fields)

    return _make
