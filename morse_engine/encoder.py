"""Message encoder: text in, Morse-keyed int16 PCM out.

Pipeline: text -> timing segments per character -> tone/silence
buffers per segment -> one concatenated buffer.

Every character is resolved before any audio is synthesized, so an
unsupported character fails the whole call without partial output.
"""

from __future__ import annotations

import functools
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import numpy as np

from . import tone
from .errors import UnknownCharacterError
from .timing import timings_for
from .types import AudioChunk, EncodingConfig, TimingSegment

log = logging.getLogger("encoder")

CHANNELS = 1


@functools.lru_cache(maxsize=128)
def _segment_samples(frequency_hz: float, duration_seconds: float,
                     volume_percent: int, sample_rate_hz: int) -> np.ndarray:
    # tone.synthesize returns read-only arrays, safe to share between callers
    return tone.synthesize(frequency_hz, duration_seconds, volume_percent, sample_rate_hz)


def _resolve(message: str, config: EncodingConfig) -> list[tuple[TimingSegment, ...]]:
    """Timing segments for every character, in order."""
    resolved = []
    for index, character in enumerate(message):
        try:
            resolved.append(timings_for(character, config))
        except UnknownCharacterError as e:
            raise UnknownCharacterError(e.character, index) from e
    return resolved


def _synthesize_character(segments: tuple[TimingSegment, ...],
                          config: EncodingConfig) -> np.ndarray:
    parts = [
        _segment_samples(
            config.tone_frequency_hz,
            segment.duration_seconds,
            0 if segment.silent else config.volume_percent,
            config.sample_rate_hz,
        )
        for segment in segments
    ]
    return np.concatenate(parts)


def encode(message: str, config: Optional[EncodingConfig] = None,
           max_workers: Optional[int] = None) -> np.ndarray:
    """Encode a message as a read-only int16 sample buffer.

    Args:
        message: Text to key. Letters are case-insensitive; a space is a
            word gap.
        config: Tone and timing parameters. Defaults to EncodingConfig().
        max_workers: If greater than 1, characters are synthesized on a
            thread pool. Output order always follows the message.

    Raises:
        UnknownCharacterError: carrying the character and its index.
    """
    config = config or EncodingConfig()
    resolved = _resolve(message, config)

    if not resolved:
        samples = np.zeros(0, dtype=np.int16)
        samples.setflags(write=False)
        return samples

    if max_workers is not None and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            # map() yields results in submission order
            chunks = list(pool.map(lambda segs: _synthesize_character(segs, config), resolved))
    else:
        chunks = [_synthesize_character(segs, config) for segs in resolved]

    samples = np.concatenate(chunks)
    samples.setflags(write=False)

    log.debug(
        "Encoded %d chars -> %d samples @ %dHz (%.2fs)",
        len(message),
        len(samples),
        config.sample_rate_hz,
        len(samples) / config.sample_rate_hz,
    )
    return samples


def render(message: str, config: Optional[EncodingConfig] = None,
           max_workers: Optional[int] = None) -> AudioChunk:
    """Encode a message and pack it as little-endian PCM for playback."""
    config = config or EncodingConfig()
    samples = encode(message, config, max_workers=max_workers)
    return AudioChunk(
        samples=samples.astype("<i2").tobytes(),
        sample_rate=config.sample_rate_hz,
        channels=CHANNELS,
    )


def message_duration(message: str, config: Optional[EncodingConfig] = None) -> float:
    """Nominal length in seconds, before cycle quantization."""
    config = config or EncodingConfig()
    return sum(
        segment.duration_seconds
        for segments in _resolve(message, config)
        for segment in segments
    )
