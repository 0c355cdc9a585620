# tests/test_settings.py
"""Tests for Settings.

Settings is a plain BaseModel (no env var reading).
Env vars are read by the config module at the application layer.
"""

import pydantic
import pytest

from quizmultiplier.settings import Settings


class TestSettings:
    def test_default_settings(self):
        """Test Settings has correct defaults."""
        settings = Settings()
        assert settings.max_concurrent_generations == 15
        assert settings.generation_timeout == 10.0
        assert settings.seed is None
        assert settings.policy_path is None
        assert settings.score_questions is False
        assert settings.log_level == "WARNING"

    def test_settings_with_custom_values(self):
        """Test Settings accepts custom values."""
        settings = Settings(
            max_concurrent_generations=4,
            generation_timeout=None,
            seed=7,
            policy_path="policy.yaml",
            score_questions=True,
        )
        assert settings.max_concurrent_generations == 4
        assert settings.generation_timeout is None
        assert settings.seed == 7
        assert settings.policy_path == "policy.yaml"
        assert settings.score_questions is True

    def test_concurrency_must_be_positive(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(max_concurrent_generations=0)

    def test_timeout_must_be_positive(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(generation_timeout=0)

    def test_with_profile_reproducible(self):
        """Test Settings.with_profile('reproducible') applies correct values."""
        settings = Settings.with_profile("reproducible")
        assert settings.seed == 0
        assert settings.max_concurrent_generations == 1

    def test_with_profile_fast(self):
        settings = Settings.with_profile("fast")
        assert settings.max_concurrent_generations == 32
        assert settings.generation_timeout == 2.0

    def test_with_profile_overrides_take_precedence(self):
        settings = Settings.with_profile("reproducible", seed=99)
        assert settings.seed == 99
        assert settings.max_concurrent_generations == 1

    def test_with_profile_unknown(self):
        with pytest.raises(ValueError, match="Unknown profile"):
            Settings.with_profile("turbo")  # type: ignore[arg-type]
