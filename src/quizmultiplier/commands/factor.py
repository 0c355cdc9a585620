# src/quizmultiplier/commands/factor.py
"""Factor command - show how a base fact would be expanded, without generating."""

from __future__ import annotations

from pathlib import Path

from quizmultiplier.commands.base import FactorResult
from quizmultiplier.commands.files import InputFileError, load_fact
from quizmultiplier.config import build_settings, create_engine, load_config
from quizmultiplier.generators.exceptions import ConfigurationError


def factor(
    fact_path: str | Path,
    config_path: str | Path | None = None,
) -> FactorResult:
    """Compute the multiplication plan for the fact in ``fact_path``.

    Args:
        fact_path: YAML or JSON file holding one base fact
        config_path: Override config file path

    Returns:
        FactorResult with the factor and the types each pass would use
    """
    try:
        fact = load_fact(fact_path)
    except InputFileError as e:
        return FactorResult(success=False, error=str(e))

    config = load_config(config_path)
    try:
        engine = create_engine(build_settings(config), config)
    except (ConfigurationError, ValueError) as e:
        return FactorResult(success=False, error=str(e))

    return FactorResult(
        success=True,
        fact_id=fact.id,
        factor=engine.calculate_multiplication_factor(fact),
        relevant_types=engine.get_relevant_question_types(fact),
        high_impact_types=engine.get_high_impact_types(fact),
    )
