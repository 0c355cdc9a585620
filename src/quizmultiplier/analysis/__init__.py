# src/quizmultiplier/analysis/__init__.py
"""Question set analysis: difficulty inference, pattern similarity, quality review and scoring."""

from quizmultiplier.analysis.difficulty import DifficultyCalculator, identify_subjects
from quizmultiplier.analysis.patterns import PatternAnalyzer, TrendAnalysis
from quizmultiplier.analysis.quality import QualityValidator
from quizmultiplier.analysis.scoring import score_questions, validate_questions

__all__ = [
    "DifficultyCalculator",
    "PatternAnalyzer",
    "QualityValidator",
    "TrendAnalysis",
    "identify_subjects",
    "score_questions",
    "validate_questions",
]
