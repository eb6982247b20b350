"""International Morse Code table and the character -> timing model."""

import logging
from types import MappingProxyType

from .errors import InvalidParameter, UnknownCharacterError
from .types import EncodingConfig, Symbol, TimingSegment

log = logging.getLogger("timing")

WORD_SEPARATOR = " "

# ── Code table ────────────────────────────────────────────────
# Keys are normalized (lower-case) characters.

CODE_TABLE = MappingProxyType({
    # Letters
    "a": ".-",     "b": "-...",   "c": "-.-.",   "d": "-..",
    "e": ".",      "f": "..-.",   "g": "--.",    "h": "....",
    "i": "..",     "j": ".---",   "k": "-.-",    "l": ".-..",
    "m": "--",     "n": "-.",     "o": "---",    "p": ".--.",
    "q": "--.-",   "r": ".-.",    "s": "...",    "t": "-",
    "u": "..-",    "v": "...-",   "w": ".--",    "x": "-..-",
    "y": "-.--",   "z": "--..",
    # Digits
    "0": "-----",  "1": ".----",  "2": "..---",  "3": "...--",
    "4": "....-",  "5": ".....",  "6": "-....",  "7": "--...",
    "8": "---..",  "9": "----.",
    # Punctuation
    ".": ".-.-.-", ",": "--..--", "?": "..--..", "!": "-.-.--",
    "/": "-..-.",  "(": "-.--.",  ")": "-.--.-", "&": ".-...",
    ":": "---...", ";": "-.-.-.", "=": "-...-",  "+": ".-.-.",
    "-": "-....-", "_": "..--.-", '"': ".-..-.", "$": "...-..-",
    "@": ".--.-.", "'": ".----.",
})

_ELEMENTS = {".": Symbol.DOT, "-": Symbol.DASH}


def _single(character: str) -> str:
    if not isinstance(character, str) or len(character) != 1:
        raise InvalidParameter(f"Expected a single character, got {character!r}")
    return character


def is_supported(character: str) -> bool:
    """True if the character can be encoded (space included)."""
    _single(character)
    return character == WORD_SEPARATOR or character.lower() in CODE_TABLE


def code_for(character: str) -> str:
    """Dot/dash string for a character. Raises UnknownCharacterError."""
    code = CODE_TABLE.get(_single(character).lower())
    if code is None:
        raise UnknownCharacterError(character)
    return code


def timings_for(character: str, config: EncodingConfig) -> tuple:
    """Expand one character into its ordered tone/silence segments.

    A space is a single word gap. Any other supported character becomes
    its dots and dashes separated by intra-character gaps, followed by
    one letter gap.

    Raises:
        UnknownCharacterError: if the character has no Morse code.
    """
    unit = config.time_unit_seconds

    if _single(character) == WORD_SEPARATOR:
        return (_segment(Symbol.WORD_GAP, unit),)

    code = code_for(character)
    segments = []
    for i, element in enumerate(code):
        if i:
            segments.append(_segment(Symbol.INTRA_GAP, unit))
        segments.append(_segment(_ELEMENTS[element], unit))
    segments.append(_segment(Symbol.LETTER_GAP, unit))
    return tuple(segments)


def _segment(symbol: Symbol, unit: float) -> TimingSegment:
    return TimingSegment(
        duration_seconds=symbol.units * unit,
        silent=symbol.silent,
        symbol=symbol,
    )


def to_code_string(message: str) -> str:
    """Render a message as dots and dashes, e.g. 'sos sos' -> '... --- ... / ... --- ...'.

    Display only; raises UnknownCharacterError with the offending index.
    """
    words = []
    for word_start, word in _words(message):
        codes = []
        for offset, character in enumerate(word):
            try:
                codes.append(code_for(character))
            except UnknownCharacterError as e:
                raise UnknownCharacterError(character, word_start + offset) from e
        words.append(" ".join(codes))
    return " / ".join(words)


def _words(message: str):
    start = 0
    for word in message.split(WORD_SEPARATOR):
        if word:
            yield start, word
        start += len(word) + 1
