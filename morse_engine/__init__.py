"""Morse code -> PCM audio engine."""
