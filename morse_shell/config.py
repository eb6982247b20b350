"""Settings for the Morse shell.

Uses pydantic-settings to load MORSE_* variables from the environment
or the project's .env file, with type validation and the engine's
defaults.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from morse_engine.types import EncodingConfig


class Settings(BaseSettings):
    # Tone
    tone_frequency_hz: float = Field(600.0, gt=0)
    volume_percent: int = Field(100, ge=0, le=100)

    # Timing (seconds per dot)
    time_unit_seconds: float = Field(0.25, gt=0)

    # Output
    sample_rate_hz: int = Field(44100, gt=0)

    # Synthesis threads (1 = inline)
    workers: int = Field(1, ge=1)

    model_config = {
        "env_prefix": "MORSE_",
        "env_file": str(Path(__file__).resolve().parent.parent / ".env"),
        "extra": "ignore",
    }

    def encoding_config(self, **overrides) -> EncodingConfig:
        """Build an EncodingConfig, letting non-None overrides win."""
        values = {
            "tone_frequency_hz": self.tone_frequency_hz,
            "time_unit_seconds": self.time_unit_seconds,
            "volume_percent": self.volume_percent,
            "sample_rate_hz": self.sample_rate_hz,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return EncodingConfig(**values)


settings = Settings()
