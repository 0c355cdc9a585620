# tests/commands/test_config.py
"""Tests for the config command."""

import os

from quizmultiplier.commands import config_cmd
from quizmultiplier.policy import POLICY_VERSION


def _sources(result):
    return {s.name: (s.value, s.source) for s in result.settings}


class TestConfigCommand:
    def test_defaults(self):
        result = config_cmd.config()

        assert result.success is True
        assert result.config_path is None
        assert result.policy_version == POLICY_VERSION
        sources = _sources(result)
        assert sources["seed"] == ("random", "default")
        assert sources["policy_path"] == ("(built-in)", "default")
        assert sources["generation_timeout"] == ("10.0s", "default")

    def test_includes_every_setting(self):
        names = [s.name for s in config_cmd.config().settings]
        assert names == [
            "max_concurrent_generations",
            "generation_timeout",
            "seed",
            "policy_path",
            "score_questions",
            "log_level",
        ]

    def test_yaml_and_env_sources(self, temp_dir, monkeypatch, write_yaml):
        path = write_yaml(
            os.path.join(temp_dir, "quizmult.yaml"),
            {"settings": {"seed": 3, "max_concurrent_generations": 4}},
        )
        monkeypatch.setenv("QUIZMULT_SEED", "11")

        result = config_cmd.config(path)
        sources = _sources(result)

        assert result.config_path == path
        assert sources["seed"] == ("11", "env var")
        assert sources["max_concurrent_generations"] == ("4", "yaml")
        assert sources["log_level"] == ("WARNING", "default")

    def test_policy_version_from_override(self, temp_dir, write_yaml):
        path = write_yaml(os.path.join(temp_dir, "quizmult.yaml"), {"policy": {"version": "x"}})
        assert config_cmd.config(path).policy_version == "x"

    def test_missing_policy_file(self, temp_dir, write_yaml):
        path = write_yaml(
            os.path.join(temp_dir, "quizmult.yaml"), {"policy_path": "missing-policy.yaml"}
        )
        result = config_cmd.config(path)

        assert result.success is False
        assert "Policy file not found" in result.error

    def test_unknown_keys_are_warned(self, temp_dir, write_yaml):
        path = write_yaml(
            os.path.join(temp_dir, "quizmult.yaml"),
            {"settings": {"seed": 1, "colour": "blue"}, "extras": True},
        )
        result = config_cmd.config(path)

        assert result.success is True
        assert result.warnings == [
            f"Unknown config keys in {path}: extras",
            "Unknown settings keys: colour",
        ]

    def test_clean_config_has_no_warnings(self):
        assert config_cmd.config().warnings == []
