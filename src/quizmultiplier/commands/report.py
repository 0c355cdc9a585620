# src/quizmultiplier/commands/report.py
"""Report command - pattern analysis over a saved question set."""

from __future__ import annotations

from pathlib import Path

from quizmultiplier.analysis import PatternAnalyzer
from quizmultiplier.commands.base import ReportResult
from quizmultiplier.commands.files import InputFileError, load_questions


def report(questions_path: str | Path) -> ReportResult:
    """Build the plain text pattern report for the questions in ``questions_path``."""
    try:
        questions = load_questions(questions_path)
    except InputFileError as e:
        return ReportResult(success=False, error=str(e))

    if not questions:
        return ReportResult(success=False, error=f"No questions in {questions_path}")

    return ReportResult(
        success=True,
        question_count=len(questions),
        report=PatternAnalyzer().pattern_report(questions),
    )
