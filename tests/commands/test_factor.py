# tests/commands/test_factor.py
"""Tests for the factor command."""

import os

from quizmultiplier.commands import factor
from quizmultiplier.models import QuestionType


class TestFactorCommand:
    def test_polity_plan(self, fact_file):
        result = factor.factor(fact_file)

        assert result.success is True
        assert result.fact_id == "fr-21"
        assert result.factor == 15
        assert result.relevant_types == list(QuestionType)
        assert result.high_impact_types[:3] == [
            QuestionType.SINGLE_CORRECT_MCQ,
            QuestionType.MULTIPLE_CORRECT_MCQ,
            QuestionType.CASE_STUDY_BASED,
        ]

    def test_geography_plan(self, geography_fact_file):
        result = factor.factor(geography_fact_file)

        assert result.factor == 4
        assert QuestionType.ASSERTION_REASONING not in result.relevant_types
        assert QuestionType.MAP_BASED in result.high_impact_types

    def test_missing_file(self, temp_dir):
        result = factor.factor(os.path.join(temp_dir, "missing.yaml"))

        assert result.success is False
        assert "File not found" in result.error
