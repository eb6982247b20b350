"""Shared data types for the Morse engine."""

import math
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidParameter


class Symbol(Enum):
    """A Morse element, valued as (length in time units, silent)."""

    DOT = (1, False)
    DASH = (3, False)
    INTRA_GAP = (1, True)
    LETTER_GAP = (3, True)
    WORD_GAP = (7, True)

    def __init__(self, units: int, silent: bool):
        self.units = units
        self.silent = silent


@dataclass(frozen=True)
class TimingSegment:
    """One tone burst or one silence interval."""
    duration_seconds: float
    silent: bool
    symbol: Symbol

    def __post_init__(self):
        if not (math.isfinite(self.duration_seconds) and self.duration_seconds > 0):
            raise InvalidParameter(
                f"Segment duration must be positive, got {self.duration_seconds!r}"
            )


@dataclass(frozen=True)
class EncodingConfig:
    """Tone and timing parameters for one encode call."""
    tone_frequency_hz: float = 600.0
    time_unit_seconds: float = 0.25
    volume_percent: int = 100
    sample_rate_hz: int = 44100

    def __post_init__(self):
        if not (math.isfinite(self.tone_frequency_hz) and self.tone_frequency_hz > 0):
            raise InvalidParameter(
                f"Tone frequency must be positive, got {self.tone_frequency_hz!r}"
            )
        if not (math.isfinite(self.time_unit_seconds) and self.time_unit_seconds > 0):
            raise InvalidParameter(
                f"Time unit must be positive, got {self.time_unit_seconds!r}"
            )
        if not 0 <= self.volume_percent <= 100:
            raise InvalidParameter(
                f"Volume must be within 0..100, got {self.volume_percent!r}"
            )
        rate = self.sample_rate_hz
        if not (math.isfinite(rate) and rate > 0 and float(rate).is_integer()):
            raise InvalidParameter(
                f"Sample rate must be a positive whole number, got {self.sample_rate_hz!r}"
            )


@dataclass
class AudioChunk:
    """A finished block of raw PCM audio data."""
    samples: bytes          # 16-bit signed LE PCM
    sample_rate: int = 44100
    channels: int = 1

    @property
    def duration_seconds(self) -> float:
        return len(self.samples) / (2 * self.channels * self.sample_rate)
