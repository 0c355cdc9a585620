# src/quizmultiplier/commands/base.py
"""Base types for the commands layer.

This module defines the result structures returned by every command. The
CLI renders them; library callers can inspect them directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from quizmultiplier.models import Question, QuestionType


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class GenerateResult(CommandResult):
    """Result of the generate command.

    Attributes:
        fact_id: Id of the base fact that was multiplied
        factor: Multiplication factor used for the main pass
        questions: The deduplicated question set
        failures: Descriptions of generator calls that yielded nothing
        output_path: File the questions were written to (if any)
    """

    fact_id: str = ""
    factor: int = 0
    questions: list[Question] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)
    output_path: str | None = None

    @property
    def type_counts(self) -> dict[QuestionType, int]:
        """Question count per type, in QuestionType order."""
        counts = {qt: 0 for qt in QuestionType}
        for question in self.questions:
            counts[question.type] += 1
        return {qt: count for qt, count in counts.items() if count}


@dataclass
class QuestionValidation:
    """Validation outcome for a single question."""

    question_id: str
    question_type: QuestionType
    is_valid: bool
    quality_score: int
    issues: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


@dataclass
class ValidateResult(CommandResult):
    """Result of the validate command.

    Attributes:
        validations: Per-question outcomes, in file order
    """

    validations: list[QuestionValidation] = field(default_factory=list)

    @property
    def valid_count(self) -> int:
        return sum(1 for v in self.validations if v.is_valid)


@dataclass
class FactorResult(CommandResult):
    """Result of the factor command.

    Attributes:
        fact_id: Id of the inspected base fact
        factor: Multiplication factor within the policy bounds
        relevant_types: Types the main pass would generate
        high_impact_types: Types the high-impact pass would deepen
    """

    fact_id: str = ""
    factor: int = 0
    relevant_types: list[QuestionType] = field(default_factory=list)
    high_impact_types: list[QuestionType] = field(default_factory=list)


@dataclass
class ReportResult(CommandResult):
    """Result of the report command."""

    question_count: int = 0
    report: str = ""


@dataclass
class SettingInfo:
    """Information about a single setting."""

    name: str
    value: str
    source: str  # "env var", "yaml", "default"


@dataclass
class ConfigResult(CommandResult):
    """Result of the config command.

    Attributes:
        settings: List of behavioral settings with sources
        policy_version: Version string of the effective generation policy
        config_path: Path to config file (if found)
        warnings: Unknown keys found in the config file
    """

    settings: list[SettingInfo] = field(default_factory=list)
    policy_version: str = ""
    config_path: str | None = None
    warnings: list[str] = field(default_factory=list)
