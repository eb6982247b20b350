"""Exceptions raised by the Morse engine."""

from typing import Optional


class MorseError(Exception):
    """Base class for every failure the engine reports."""


class InvalidParameter(MorseError, ValueError):
    """A numeric parameter is outside its allowed range."""


class UnknownCharacterError(MorseError, ValueError):
    """A character has no Morse representation.

    ``index`` is the zero-based position in the message being encoded,
    or None when the lookup happened outside of a message.
    """

    def __init__(self, character: str, index: Optional[int] = None):
        self.character = character
        self.index = index
        where = f" at position {index}" if index is not None else ""
        super().__init__(f"Unsupported character {character!r}{where}")

    def __reduce__(self):
        return (type(self), (self.character, self.index))
