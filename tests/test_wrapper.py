from __future__ import annotations

import pytest

from textseg.exceptions import BoundaryUnderflowError, InvalidArgumentError
from textseg.wrapper import WindowKind, WordSpan, find_last_word, wrap_at_length

LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Phasellus eu ex sit amet "
    "sapien consectetur faucibus eget eu arcu. Lorem ipsum dolor sit amet, consectetur adipiscing "
    "elit. Curabitur vel aliquet massa. Integer id vehicula mi. Cras elementum, nisi in ultrices "
    "mollis, dui tellus tristique neque, sed egestas nunc nibh sit amet quam. Suspendisse at maximus "
    "odio, non ultricies felis. Nam maximus tortor condimentum egestas ultrices. Donec ac vehicula "
    "nulla, at viverra neque. Etiam lobortis quis tellus ut ornare."
    "Suspendisse eros metus, mattis at viverra sit amet, hendrerit non eros. Aenean nec sagittis "
    "ligula. Sed a nisi ultrices, efficitur libero pellentesque, porta nibh. Orci varius natoque "
    "penatibus et magnis dis parturient montes, nascetur ridiculous mus. Cras dictum, odio nec blandit "
    "fermentum, arcu justo commodo orci, a varius massa erat ut est. Pellentesque venenatis placerat "
    "efficitur. Donec dapibus ornare eleifend. Curabitur finibus convallis mauris eget posuere."
    "Morbi ultricies rutrum nulla ut condimentum. Aliquam vulputate iaculis nisl at lacinia. Donec "
    "ac ligula consequat, tempor elit ut, congue neque. Donec lobortis massa lorem, vitae mattis "
    "neque mollis dignissim. Nulla facilities. Donec viverra purus a accumsan pellentesque. Proin "
    "vestibulum accumsan erat vel commodo. Maecenas sapien mauris, faucibus nec consectetur eu, "
    "ultricies sit amet elit. Suspendisse. "
)

LOREM_WRAPPED_AT_40 = (
    "Lorem ipsum dolor sit amet, consectetur%adipiscing elit. Phasellus eu ex sit%amet "
    "sapien consectetur faucibus eget eu%arcu. Lorem ipsum dolor sit amet,%consectetur adipiscing elit. "
    "Curabitur%vel aliquet massa. Integer id vehicula%mi. Cras elementum, nisi in ultrices%mollis, dui "
    "tellus tristique neque, sed%egestas nunc nibh sit amet quam.%Suspendisse at maximus odio, "
    "non%ultricies felis. Nam maximus tortor%condimentum egestas ultrices. Donec ac%vehicula nulla, "
    "at viverra neque. Etiam%lobortis quis tellus ut%ornare.Suspendisse eros metus, mattis at%viverra "
    "sit amet, hendrerit non eros.%Aenean nec sagittis ligula. Sed a nisi%ultrices, efficitur libero "
    "pellentesque,%porta nibh. Orci varius natoque%penatibus et magnis dis parturient%montes, nascetur "
    "ridiculous mus. Cras%dictum, odio nec blandit fermentum, arcu%justo commodo orci, a varius massa "
    "erat%ut est. Pellentesque venenatis placerat%efficitur. Donec dapibus ornare%eleifend. Curabitur "
    "finibus convallis%mauris eget posuere.Morbi ultricies%rutrum nulla ut condimentum. Aliquam%vulputate "
    "iaculis nisl at lacinia. Donec%ac ligula consequat, tempor elit ut,%congue neque. Donec lobortis "
    "massa%lorem, vitae mattis neque mollis%dignissim. Nulla facilities. Donec%viverra purus a accumsan "
    "pellentesque.%Proin vestibulum accumsan erat vel%commodo. Maecenas sapien mauris,%faucibus nec "
    "consectetur eu, ultricies%sit amet elit. Suspendisse.%"
)


def _wrap(text: str, line_length: int) -> str:
    return wrap_at_length(text, line_length, "\n").replace("\n", "%")


@pytest.mark.parametrize(
    ("text", "line_length", "expected"),
    [
        (
            "Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
            40,
            "Lorem ipsum dolor sit amet, consectetur%adipiscing elit.%",
        ),
        (
            "Did you know? The Cow Jumped Over The Moon!",
            20,
            "Did you know? The%Cow Jumped Over The%Moon!%",
        ),
        (
            "Did you know? XX The Cow Jumped Over The Moon!",
            20,
            "Did you know? XX The%Cow Jumped Over The%Moon!%",
        ),
        (
            "       Did you know? The Cow Jumped Over The Moon!",
            20,
            "Did you know? The%Cow Jumped Over The%Moon!%",
        ),
        ("How now brown cow", 5, "How%now%brown%cow%"),
    ],
)
def test_wraps_at_word_boundaries(text: str, line_length: int, expected: str):
    assert _wrap(text, line_length) == expected


def test_wraps_long_passage():
    assert _wrap(LOREM, 40) == LOREM_WRAPPED_AT_40


def test_hyphenates_word_longer_than_line():
    wrapped = wrap_at_length("Supercalifragilisticexpialidocious", 10, "\n")

    assert wrapped == "Supercali-\nfragilist-\nicexpiali-\ndocious\n"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        # Word exactly one line long
        ("abcdefghij", "abcdefghij%"),
        # One character too long: nine kept plus hyphen, nothing dropped
        ("abcdefghijk", "abcdefghi-%jk%"),
        # Word fills the line and is followed by a space
        ("abcdefghij klm", "abcdefghij%klm%"),
        # First word fits, second overflows every line
        ("a Supercalifragilistic", "a%Supercali-%fragilist-%ic%"),
    ],
)
def test_hyphenation_boundaries(text: str, expected: str):
    assert _wrap(text, 10) == expected


def test_single_trailing_character_gets_its_own_line():
    assert _wrap("abcde f", 5) == "abcde%f%"


def test_leading_whitespace_is_skipped():
    assert _wrap("   hello", 5) == "hello%"


def test_tabs_and_newlines_count_as_whitespace():
    assert _wrap("one\ttwo\nthree", 5) == "one%two%three%"


def test_uses_custom_break_character():
    assert wrap_at_length("How now brown cow", 8, "|") == "How now|brown|cow|"


@pytest.mark.parametrize("text", [" ", "                           ", " \t \n "])
def test_all_whitespace_returns_single_break(text: str):
    assert wrap_at_length(text, 10, "\n") == "\n"


def test_minimum_line_length_is_accepted():
    assert wrap_at_length("abcde", 5, "\n") == "abcde\n"


@pytest.mark.parametrize("line_length", [-1, 0, 4])
def test_line_length_below_minimum_raises(line_length: int):
    with pytest.raises(BoundaryUnderflowError) as error:
        wrap_at_length("Lorem ipsum dolor sit amet", line_length, "\n")

    assert error.value.parameter == "line_length"
    assert error.value.value == line_length


def test_null_break_character_raises():
    with pytest.raises(BoundaryUnderflowError) as error:
        wrap_at_length("Lorem ipsum dolor sit amet", 50, "\0")

    assert error.value.parameter == "break_char"


def test_empty_text_raises():
    with pytest.raises(InvalidArgumentError) as error:
        wrap_at_length("", 10, "\n")

    assert error.value.parameter == "text"


@pytest.mark.parametrize("break_char", ["", "ab"])
def test_break_character_must_be_single_character(break_char: str):
    with pytest.raises(InvalidArgumentError):
        wrap_at_length("Lorem ipsum", 10, break_char)


@pytest.mark.parametrize(
    ("text", "start", "end", "expected"),
    [
        ("How now", 0, 6, WordSpan(WindowKind.MIXED, 4, 6)),
        ("How now ", 0, 7, WordSpan(WindowKind.MIXED, 4, 6)),
        ("How", 0, 2, WordSpan(WindowKind.SINGLE_WORD, 0, 2)),
        ("Supercalifragilistic", 2, 9, WordSpan(WindowKind.SINGLE_WORD, 2, 9)),
        ("     ", 0, 4, WordSpan(WindowKind.ALL_WHITESPACE)),
        ("a", 0, 0, WordSpan(WindowKind.SINGLE_WORD, 0, 0)),
        (" ", 0, 0, WordSpan(WindowKind.ALL_WHITESPACE)),
        ("ab   cd", 0, 4, WordSpan(WindowKind.MIXED, 0, 1)),
    ],
)
def test_find_last_word(text: str, start: int, end: int, expected: WordSpan):
    assert find_last_word(text, start, end) == expected


def test_word_at_window_start_is_emitted_whole():
    # A word that starts a mixed window always ends before its edge
    assert wrap_at_length("ab   cd", 5, "%") == "ab%cd%"
    assert wrap_at_length("ab   cdefgh", 5, "%") == "ab%cdef-%gh%"


@pytest.mark.parametrize(("start", "end"), [(-1, 2), (0, 5), (3, 2)])
def test_find_last_word_rejects_invalid_window(start: int, end: int):
    with pytest.raises(InvalidArgumentError):
        find_last_word("abcde", start, end)
