# src/quizmultiplier/config.py
"""Configuration loading utilities for quizmultiplier.

This module provides configuration loading that can be used by:
- CLI commands
- External applications embedding the engine as a library

It handles:
- Finding and loading quizmult.yaml config files
- Reading QUIZMULT_* environment overrides
- Building Settings objects from multiple sources
- Loading generation policy overrides
- Creating MultiplicationEngine instances from configuration
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from quizmultiplier.generators.exceptions import PolicyError
from quizmultiplier.policy import GenerationPolicy, deep_merge

if TYPE_CHECKING:
    from quizmultiplier.engine import MultiplicationEngine
    from quizmultiplier.settings import Settings

CONFIG_FILES = ["quizmult.yaml", "quizmult.yml", ".quizmultrc"]
ENV_PREFIX = "QUIZMULT_"


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file in current directory or parent directories.

    Args:
        start_dir: Directory to start searching from (default: cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


VALID_ROOT_KEYS = {"settings", "policy", "policy_path"}

VALID_SETTINGS_KEYS = {
    "max_concurrent_generations",
    "generation_timeout",
    "seed",
    "policy_path",
    "score_questions",
    "log_level",
    "profile",
}


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Validate config and return warnings about unknown keys.

    Args:
        config: The loaded configuration dictionary
        config_path: Path to config file (for error messages)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    settings = config.get("settings", {})
    if isinstance(settings, dict):
        unknown_settings = set(settings.keys()) - VALID_SETTINGS_KEYS
        if unknown_settings:
            warnings.append(f"Unknown settings keys: {', '.join(sorted(unknown_settings))}")

    policy = config.get("policy")
    if policy is not None and not isinstance(policy, dict):
        warnings.append("The policy section must be a mapping of table overrides")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)
    """
    config_path = Path(config_path) if config_path is not None else find_config_file()

    if config_path is None:
        return {}

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    return config


def _safe_int(value: str | None) -> int | None:
    """Parse int from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _safe_float(value: str | None) -> float | None:
    """Parse float from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def get_settings_from_env() -> dict[str, Any]:
    """Read behavioral settings from QUIZMULT_* environment variables.

    Returns values that were explicitly set (not defaults), to allow proper
    precedence: YAML settings are used unless overridden by env vars.

    Returns:
        Dictionary of setting name -> value for explicitly set env vars
    """
    result: dict[str, Any] = {}

    if (val := _safe_int(os.environ.get("QUIZMULT_MAX_CONCURRENT_GENERATIONS"))) is not None:
        result["max_concurrent_generations"] = val
    if (timeout := _safe_float(os.environ.get("QUIZMULT_GENERATION_TIMEOUT"))) is not None:
        result["generation_timeout"] = timeout
    if (val := _safe_int(os.environ.get("QUIZMULT_SEED"))) is not None:
        result["seed"] = val
    if "QUIZMULT_POLICY_PATH" in os.environ:
        result["policy_path"] = os.environ["QUIZMULT_POLICY_PATH"] or None
    if "QUIZMULT_SCORE_QUESTIONS" in os.environ:
        result["score_questions"] = os.environ["QUIZMULT_SCORE_QUESTIONS"].lower() in (
            "true",
            "1",
            "yes",
        )
    if os.environ.get("QUIZMULT_LOG_LEVEL"):
        result["log_level"] = os.environ["QUIZMULT_LOG_LEVEL"].upper()
    if os.environ.get("QUIZMULT_PROFILE"):
        result["profile"] = os.environ["QUIZMULT_PROFILE"]

    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract settings from the 'settings:' section of a YAML config.

    A root-level ``policy_path`` is accepted as a shorthand.

    Args:
        config: The loaded YAML configuration

    Returns:
        Dictionary of setting name -> value
    """
    yaml_settings = config.get("settings", {}) or {}
    result = {key: yaml_settings[key] for key in VALID_SETTINGS_KEYS if key in yaml_settings}
    if "policy_path" in config and "policy_path" not in result:
        result["policy_path"] = config["policy_path"]
    return result


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build Settings object from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables
    2. YAML settings: section
    3. Profile values, when a profile is named
    4. Settings class defaults

    Args:
        config: YAML configuration dictionary
        env_settings: Environment variable overrides (if None, reads from env)

    Returns:
        Configured Settings instance
    """
    from quizmultiplier.settings import Settings

    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()

    merged = {**yaml_settings, **env_settings}
    profile = merged.pop("profile", None)

    if profile:
        return Settings.with_profile(profile, **merged)
    return Settings(**merged)


def load_policy(
    policy_path: Path | str | None = None,
    overrides: dict[str, Any] | None = None,
) -> GenerationPolicy:
    """Load the generation policy.

    Overrides from a policy YAML file are applied first, then inline
    ``overrides`` (the ``policy:`` section of quizmult.yaml).

    Args:
        policy_path: Optional YAML file with table overrides
        overrides: Optional inline table overrides

    Returns:
        The merged GenerationPolicy

    Raises:
        PolicyError: If the file is missing or the merged tables are invalid
    """
    data: dict[str, Any] = {}
    if policy_path is not None:
        path = Path(policy_path)
        if not path.exists():
            raise PolicyError(f"Policy file not found: {path}")
        with open(path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise PolicyError(f"Policy file {path} must contain a mapping")
        data.update(loaded)
    if overrides:
        data = deep_merge(data, overrides)
    if not data:
        return GenerationPolicy.default()
    try:
        return GenerationPolicy.from_mapping(data)
    except ValidationError as e:
        raise PolicyError(f"Invalid generation policy: {e}") from e


def create_engine(
    settings: Settings | None = None,
    config: dict[str, Any] | None = None,
) -> MultiplicationEngine:
    """Create a MultiplicationEngine from settings and config.

    Args:
        settings: Settings to use (built from config and env when None)
        config: YAML configuration dictionary (loaded from disk when None)

    Returns:
        A configured MultiplicationEngine
    """
    from quizmultiplier.engine import MultiplicationEngine

    if config is None:
        config = load_config()
    if settings is None:
        settings = build_settings(config)
    policy = load_policy(settings.policy_path, config.get("policy"))
    return MultiplicationEngine(policy=policy, settings=settings)
