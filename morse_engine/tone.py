"""Tone synthesis: cycle-quantized sine bursts as int16 PCM.

A burst is always a whole number of waveform cycles long, so it starts
and ends on a zero crossing and bursts can be butted together without
clicks. Silence uses the same quantized length so timing stays exact.
"""

import logging
import math

import numpy as np

from .errors import InvalidParameter

log = logging.getLogger("tone")

INT16_LIMIT = 32767
DEFAULT_SAMPLE_RATE = 44100

# Tolerance on the cycle count before rounding up, so 150.0000000001
# cycles from float noise stays 150.
_CYCLE_EPSILON = 1e-9


def _check_parameters(frequency_hz: float, duration_seconds: float,
                      volume_percent: float, sample_rate_hz: int) -> None:
    if not math.isfinite(frequency_hz) or frequency_hz == 0:
        raise InvalidParameter(f"Frequency must be non-zero, got {frequency_hz!r}")
    if not (math.isfinite(duration_seconds) and duration_seconds > 0):
        raise InvalidParameter(f"Duration must be positive, got {duration_seconds!r}")
    if not 0 <= volume_percent <= 100:
        raise InvalidParameter(f"Volume must be within 0..100, got {volume_percent!r}")
    if not (math.isfinite(sample_rate_hz) and sample_rate_hz > 0
            and float(sample_rate_hz).is_integer()):
        raise InvalidParameter(f"Sample rate must be a positive whole number, got {sample_rate_hz!r}")


def samples_in(frequency_hz: float, duration_seconds: float,
               sample_rate_hz: int = DEFAULT_SAMPLE_RATE) -> int:
    """Number of samples a burst occupies after rounding up to whole cycles."""
    _check_parameters(frequency_hz, duration_seconds, 0, sample_rate_hz)
    samples_per_cycle = sample_rate_hz / abs(frequency_hz)
    cycles = math.ceil(sample_rate_hz * duration_seconds / samples_per_cycle - _CYCLE_EPSILON)
    cycles = max(1, cycles)
    return int(round(cycles * samples_per_cycle))


def synthesize(frequency_hz: float, duration_seconds: float,
               volume_percent: float = 100,
               sample_rate_hz: int = DEFAULT_SAMPLE_RATE) -> np.ndarray:
    """Generate one tone (or silence) as a read-only int16 array.

    Args:
        frequency_hz: Tone pitch. Sign is ignored; zero is rejected.
        duration_seconds: Requested length, rounded up to whole cycles
            with a minimum of one cycle.
        volume_percent: 0..100. Zero yields silence of the same length.
        sample_rate_hz: Output sample rate.

    Raises:
        InvalidParameter: if any argument is out of range. Nothing is
            generated in that case.
    """
    _check_parameters(frequency_hz, duration_seconds, volume_percent, sample_rate_hz)
    count = samples_in(frequency_hz, duration_seconds, sample_rate_hz)

    if volume_percent == 0:
        samples = np.zeros(count, dtype=np.int16)
    else:
        step = 2.0 * math.pi * abs(frequency_hz) / sample_rate_hz
        wave = np.sin(np.arange(count, dtype=np.float64) * step)
        scaled = np.rint(wave * (volume_percent / 100.0) * INT16_LIMIT)
        samples = np.clip(scaled, -INT16_LIMIT, INT16_LIMIT).astype(np.int16)

    samples.setflags(write=False)
    log.debug(
        "Tone %.1fHz %.3fs vol=%s%% -> %d samples @ %dHz (%.4fs)",
        abs(frequency_hz),
        duration_seconds,
        volume_percent,
        count,
        sample_rate_hz,
        count / sample_rate_hz,
    )
    return samples
