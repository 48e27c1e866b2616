"""Configuration and environment loading."""

import logging

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from wordmix.schemas import ShuffleOptions

load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    separators: str = Field(default=" ", alias="WORDMIX_SEPARATORS")
    only_vowels: bool = Field(default=False, alias="WORDMIX_ONLY_VOWELS")
    seed: int | None = Field(default=None, alias="WORDMIX_SEED")
    log_level: str = Field(default="WARNING", alias="WORDMIX_LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize to an upper-case level name known to logging."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = {"env_file": ".env", "extra": "ignore"}

    def to_options(
        self,
        *,
        only_vowels: bool | None = None,
        separators: str | None = None,
        seed: int | None = None,
    ) -> ShuffleOptions:
        """Build shuffle options, letting explicit arguments override settings."""
        return ShuffleOptions(
            only_vowels=self.only_vowels if only_vowels is None else only_vowels,
            separators=self.separators if separators is None else separators,
            seed=self.seed if seed is None else seed,
        )


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get application settings singleton."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
