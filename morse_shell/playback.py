"""Audio sinks for finished PCM: the sound device and WAV files."""

import logging
import wave
from pathlib import Path

import numpy as np

from morse_engine.types import AudioChunk

log = logging.getLogger("playback")

SAMPLE_WIDTH = 2  # int16


class PlaybackError(Exception):
    """The sound device could not play a buffer."""


def write_wav(path, chunk: AudioChunk) -> Path:
    """Save a chunk as a 16-bit PCM WAV file. Returns the path written."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with wave.open(str(path), "wb") as wf:
        wf.setnchannels(chunk.channels)
        wf.setsampwidth(SAMPLE_WIDTH)
        wf.setframerate(chunk.sample_rate)
        wf.writeframes(chunk.samples)
    log.info("Wrote %s (%.2fs)", path, chunk.duration_seconds)
    return path


def play(chunk: AudioChunk) -> None:
    """Play a chunk on the default output device and block until stopped."""
    if not chunk.samples:
        log.debug("Nothing to play")
        return

    # Imported lazily: PortAudio is only needed when something plays
    import sounddevice as sd

    samples = np.frombuffer(chunk.samples, dtype="<i2")

    try:
        log.info("Playing %.2fs @ %dHz", chunk.duration_seconds, chunk.sample_rate)
        sd.play(samples, samplerate=chunk.sample_rate)
        sd.wait()
    except sd.PortAudioError as e:
        raise PlaybackError(str(e)) from e
    log.info("Stopped")
