# src/quizmultiplier/commands/generate.py
"""Generate command - multiply one base fact into a question set.

This module provides the generation logic that the CLI and embedding
applications use.
"""

from __future__ import annotations

from pathlib import Path

from quizmultiplier.commands.base import GenerateResult
from quizmultiplier.commands.files import InputFileError, load_fact, write_questions
from quizmultiplier.config import build_settings, create_engine, load_config
from quizmultiplier.generators.exceptions import ConfigurationError


def generate(
    fact_path: str | Path,
    config_path: str | Path | None = None,
    seed: int | None = None,
    score: bool | None = None,
    output_path: str | Path | None = None,
) -> GenerateResult:
    """Generate the full question set for the base fact in ``fact_path``.

    Args:
        fact_path: YAML or JSON file holding one base fact
        config_path: Override config file path
        seed: Seed for reproducible output (overrides config)
        score: Attach validation and pattern scores (overrides config)
        output_path: Write the questions to this JSON file

    Returns:
        GenerateResult with the questions and any failed generator calls
    """
    try:
        fact = load_fact(fact_path)
    except InputFileError as e:
        return GenerateResult(success=False, error=str(e))

    config = load_config(config_path)
    try:
        settings = build_settings(config)
    except ValueError as e:
        return GenerateResult(success=False, error=f"Invalid settings: {e}")
    overrides: dict[str, object] = {}
    if seed is not None:
        overrides["seed"] = seed
    if score is not None:
        overrides["score_questions"] = score
    if overrides:
        settings = settings.model_copy(update=overrides)

    try:
        engine = create_engine(settings, config)
    except ConfigurationError as e:
        return GenerateResult(success=False, error=str(e))

    report = engine.multiply_with_report(fact)
    result = GenerateResult(
        success=True,
        fact_id=fact.id,
        factor=report.factor,
        questions=report.questions,
        failures=[failure.describe() for failure in report.failures],
    )

    if output_path is not None:
        try:
            result.output_path = str(write_questions(report.questions, output_path))
        except OSError as e:
            result.success = False
            result.error = f"Failed to write {output_path}: {e}"

    return result
