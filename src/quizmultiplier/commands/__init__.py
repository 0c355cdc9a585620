# src/quizmultiplier/commands/__init__.py
"""UI-agnostic command layer for quizmultiplier.

Commands return data structures, allowing callers to render results
appropriately.

Usage:
    from quizmultiplier.commands import factor, generate, validate

    # Multiply a base fact
    result = generate.generate("fact.yaml", seed=42)

    # Inspect the plan without generating
    result = factor.factor("fact.yaml")

    # Validate a saved question set
    result = validate.validate("questions.json")
"""

from quizmultiplier.commands import config_cmd, factor, generate, report, validate
from quizmultiplier.commands.base import (
    CommandResult,
    ConfigResult,
    FactorResult,
    GenerateResult,
    QuestionValidation,
    ReportResult,
    SettingInfo,
    ValidateResult,
)
from quizmultiplier.commands.files import (
    InputFileError,
    dump_questions,
    load_fact,
    load_questions,
    write_questions,
)

__all__ = [
    # Base types
    "CommandResult",
    # Result types
    "GenerateResult",
    "ValidateResult",
    "QuestionValidation",
    "FactorResult",
    "ReportResult",
    "ConfigResult",
    "SettingInfo",
    # File helpers
    "InputFileError",
    "load_fact",
    "load_questions",
    "dump_questions",
    "write_questions",
    # Command modules
    "generate",
    "validate",
    "factor",
    "report",
    "config_cmd",
]
