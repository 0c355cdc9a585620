# src/quizmultiplier/settings.py
"""Behavioral settings for quizmultiplier.

Settings are passed programmatically. The library does not read from
environment variables; the config module and the CLI do that at the
application layer and pass values explicitly.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

# Named bundles of settings
SETTINGS_PROFILES: dict[str, dict[str, Any]] = {
    # Fixed seed and serial generation: identical output on every run
    "reproducible": {
        "seed": 0,
        "max_concurrent_generations": 1,
    },
    "fast": {
        "max_concurrent_generations": 32,
        "generation_timeout": 2.0,
    },
}


class Settings(BaseModel):
    """Behavioral settings for the multiplication engine.

    Example:
        settings = Settings(seed=42, score_questions=True)

        # Or start from a named profile
        settings = Settings.with_profile("reproducible")
    """

    # Concurrency for the generator fan-out (main + high-impact + contextual calls)
    max_concurrent_generations: int = Field(default=15, ge=1)

    # Per-call timeout in seconds; a timed-out call yields zero questions
    generation_timeout: float | None = Field(default=10.0, gt=0)

    # Seed for template sampling (None = nondeterministic)
    seed: int | None = None

    # Optional YAML file overlaying the built-in generation policy
    policy_path: str | None = None

    # Run validation and pattern scoring over the final question set
    score_questions: bool = False

    log_level: str = "WARNING"

    @classmethod
    def with_profile(
        cls,
        profile: Literal["reproducible", "fast"],
        **overrides: Any,
    ) -> Settings:
        """Create Settings from a named profile.

        Args:
            profile: "reproducible" (seeded, serial) or "fast" (wide fan-out,
                short timeout)
            **overrides: Explicit values that take precedence over the profile

        Returns:
            Settings instance

        Raises:
            ValueError: If the profile name is unknown
        """
        if profile not in SETTINGS_PROFILES:
            raise ValueError(
                f"Unknown profile: {profile}. Valid profiles: {list(SETTINGS_PROFILES.keys())}"
            )
        return cls(**{**SETTINGS_PROFILES[profile], **overrides})
