import pytest

from morse_engine.errors import InvalidParameter, UnknownCharacterError
from morse_engine.timing import (
    CODE_TABLE, code_for, is_supported, timings_for, to_code_string,
)
from morse_engine.types import EncodingConfig, Symbol

UNIT = 0.1
CONFIG = EncodingConfig(time_unit_seconds=UNIT)

ITU_ALPHANUMERIC = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..",
    "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
    "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",
}


def _units(segments):
    return [(round(s.duration_seconds / UNIT), s.silent) for s in segments]


def _code_from(segments):
    return "".join(
        "." if s.symbol is Symbol.DOT else "-"
        for s in segments if not s.silent
    )


@pytest.mark.parametrize("character,code", sorted(ITU_ALPHANUMERIC.items()))
def test_alphanumerics_match_itu_table(character, code):
    assert _code_from(timings_for(character, CONFIG)) == code
    assert _code_from(timings_for(character.lower(), CONFIG)) == code


def test_punctuation_is_supported():
    for character in ".,?!/()&:;=+-_\"$@'":
        assert is_supported(character), character
    assert code_for(";") == "-.-.-."
    assert code_for("@") == ".--.-."


def test_gap_layout_of_a_letter():
    assert _units(timings_for("k", CONFIG)) == [
        (3, False), (1, True), (1, False), (1, True), (3, False), (3, True),
    ]


def test_single_element_letter_has_no_intra_gap():
    segments = timings_for("e", CONFIG)
    assert [s.symbol for s in segments] == [Symbol.DOT, Symbol.LETTER_GAP]


def test_space_is_a_single_word_gap():
    segments = timings_for(" ", CONFIG)
    assert len(segments) == 1
    assert segments[0].silent
    assert segments[0].symbol is Symbol.WORD_GAP
    assert segments[0].duration_seconds == pytest.approx(7 * UNIT)


@pytest.mark.parametrize("character", ["#", "~", "\t", "\n", "é"])
def test_unknown_character_raises(character):
    with pytest.raises(UnknownCharacterError) as exc:
        timings_for(character, CONFIG)
    assert exc.value.character == character
    assert exc.value.index is None
    assert not is_supported(character)


@pytest.mark.parametrize("value", ["", "ab"])
def test_requires_single_character(value):
    with pytest.raises(InvalidParameter):
        timings_for(value, CONFIG)


def test_code_table_is_read_only():
    with pytest.raises(TypeError):
        CODE_TABLE["#"] = "..."


def test_code_string_rendering():
    assert to_code_string("SOS sos") == "... --- ... / ... --- ..."
    assert to_code_string("") == ""


def test_code_string_reports_position():
    with pytest.raises(UnknownCharacterError) as exc:
        to_code_string("ok go#")
    assert exc.value.character == "#"
    assert exc.value.index == 5
