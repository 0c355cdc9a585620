# src/quizmultiplier/commands/config_cmd.py
"""Config command - display current configuration.

This module provides the config display logic that the CLI uses.
"""

from __future__ import annotations

from pathlib import Path

from quizmultiplier.commands.base import ConfigResult, SettingInfo
from quizmultiplier.config import (
    build_settings,
    find_config_file,
    get_settings_from_env,
    get_settings_from_yaml,
    load_config,
    load_policy,
    validate_config,
)
from quizmultiplier.generators.exceptions import ConfigurationError


def _get_setting_source(
    key: str,
    yaml_settings: dict,
    env_settings: dict,
) -> str:
    """Determine the source of a setting value."""
    if key in env_settings:
        return "env var"
    if key in yaml_settings:
        return "yaml"
    return "default"


def config(
    config_path: str | Path | None = None,
) -> ConfigResult:
    """Get current configuration settings.

    Args:
        config_path: Override config file path

    Returns:
        ConfigResult with all settings and their sources
    """
    # Load all config sources
    cli_config = load_config(config_path)
    env_settings = get_settings_from_env()
    yaml_settings = get_settings_from_yaml(cli_config)

    try:
        settings = build_settings(cli_config, env_settings)
        policy = load_policy(settings.policy_path, cli_config.get("policy"))
    except (ConfigurationError, ValueError) as e:
        return ConfigResult(success=False, error=str(e))

    found_config_path = Path(config_path) if config_path else find_config_file()

    result = ConfigResult(success=True, policy_version=policy.version)
    result.config_path = str(found_config_path) if found_config_path else None
    result.warnings = validate_config(cli_config, found_config_path)

    setting_keys = [
        ("max_concurrent_generations", str(settings.max_concurrent_generations)),
        (
            "generation_timeout",
            f"{settings.generation_timeout}s"
            if settings.generation_timeout is not None
            else "disabled",
        ),
        ("seed", str(settings.seed) if settings.seed is not None else "random"),
        ("policy_path", settings.policy_path or "(built-in)"),
        ("score_questions", str(settings.score_questions)),
        ("log_level", settings.log_level),
    ]

    for key, value in setting_keys:
        result.settings.append(
            SettingInfo(
                name=key,
                value=value,
                source=_get_setting_source(key, yaml_settings, env_settings),
            )
        )

    return result
