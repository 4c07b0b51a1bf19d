"""Length-bounded line wrapping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .constants import HYPHEN, MIN_LINE_LENGTH
from .exceptions import BoundaryUnderflowError, InvalidArgumentError


class WindowKind(Enum):
    """Classification of a candidate line window.

    Attributes:
        ALL_WHITESPACE: The window holds only whitespace.
        SINGLE_WORD: The window holds one run of non-whitespace characters.
        MIXED: The window holds at least one word boundary.
    """

    ALL_WHITESPACE = auto()
    SINGLE_WORD = auto()
    MIXED = auto()


@dataclass(frozen=True)
class WordSpan:
    """Bounds of the last word inside a window.

    Attributes:
        kind: Classification of the window.
        begin: Index of the first character of the last word, or None.
        end: Index of the last character of the last word, or None.
    """

    kind: WindowKind
    begin: int | None = None
    end: int | None = None


def _skip_whitespace(text: str, pos: int) -> int | None:
    """Return the first non-whitespace index at or after `pos`, or None."""
    while pos < len(text):
        if not text[pos].isspace():
            return pos
        pos += 1
    return None


def _find_last_non_whitespace(text: str, start: int, end: int) -> int | None:
    """Return the last non-whitespace index in ``text[start:end + 1]``, or None."""
    while end >= start:
        if not text[end].isspace():
            return end
        end -= 1
    return None


def find_last_word(text: str, start: int, end: int) -> WordSpan:
    """Locate the last word in the inclusive window ``[start, end]``.

    A word is a maximal run of non-whitespace characters, clipped to the
    window. When the window holds a single word, its span covers the whole
    window.

    Args:
        text: Host string.
        start: First index of the window.
        end: Last index of the window (inclusive).

    Returns:
        WordSpan: Window classification and the last word bounds.

    Raises:
        InvalidArgumentError: If the window lies outside `text` or is reversed.

    Examples:
        find_last_word("How now", 0, 6)  # WordSpan(MIXED, begin=4, end=6)
        find_last_word("     ", 0, 4)  # WordSpan(ALL_WHITESPACE)
    """
    if start < 0 or end >= len(text) or start > end:
        raise InvalidArgumentError(
            "window", f"[{start}, {end}] is invalid for a string of length {len(text)}"
        )

    word_end = _find_last_non_whitespace(text, start, end)
    if word_end is None:
        return WordSpan(WindowKind.ALL_WHITESPACE)

    word_begin = word_end
    while word_begin > start and not text[word_begin - 1].isspace():
        word_begin -= 1

    if word_begin == start and word_end == end:
        return WordSpan(WindowKind.SINGLE_WORD, start, end)

    return WordSpan(WindowKind.MIXED, word_begin, word_end)


def _validate_arguments(text: str, line_length: int, break_char: str) -> None:
    if not isinstance(text, str):
        raise InvalidArgumentError("text", f"expected a string, got {type(text).__name__}")
    if not text:
        raise InvalidArgumentError("text", "the target string is empty")

    if isinstance(line_length, bool) or not isinstance(line_length, int):
        raise InvalidArgumentError("line_length", "must be an integer")
    if line_length < MIN_LINE_LENGTH:
        raise BoundaryUnderflowError("line_length", line_length)

    if not isinstance(break_char, str) or len(break_char) != 1:
        raise InvalidArgumentError("break_char", "must be a single character")
    if break_char == "\0":
        raise BoundaryUnderflowError("break_char", break_char)


def wrap_at_length(text: str, line_length: int, break_char: str = "\n") -> str:
    """Re-flow text into lines of at most `line_length` characters.

    Whitespace never starts a line and runs of whitespace between lines are
    dropped. Lines break after the last word that fits; a word longer than a
    whole line is hyphenated into chunks of ``line_length - 1`` characters
    followed by ``-``. Every line, including the last, ends with
    `break_char`.

    Args:
        text: String to wrap. An all-whitespace string yields `break_char`.
        line_length: Maximum visible characters per line; at least 5.
        break_char: Character appended after each line.

    Returns:
        str: Wrapped text.

    Raises:
        InvalidArgumentError: If `text` is empty or `break_char` is not a
            single character.
        BoundaryUnderflowError: If `line_length` is below 5 or `break_char`
            is the null character.

    Examples:
        wrap_at_length("How now brown cow", 5)  # "How\\nnow\\nbrown\\ncow\\n"
        wrap_at_length("Supercalifragilistic", 10)  # "Supercali-\\nfragilist-\\nic\\n"
    """
    _validate_arguments(text, line_length, break_char)

    text_length = len(text)
    lines: list[str] = []
    pos = 0

    while pos < text_length:
        next_pos = _skip_whitespace(text, pos)
        if next_pos is None:
            break
        pos = next_pos

        if pos == text_length - 1:
            lines.append(text[pos])
            break

        window_end = min(pos + line_length - 1, text_length - 1)
        span = find_last_word(text, pos, window_end)

        if span.kind is WindowKind.ALL_WHITESPACE:
            pos = window_end + 1
            continue

        if span.kind is WindowKind.SINGLE_WORD:
            if window_end + 1 >= text_length:
                lines.append(text[pos:])
                break
            if text[window_end + 1].isspace():
                lines.append(text[pos : window_end + 1])
                pos = window_end + 1
            else:
                # The word is longer than a line
                lines.append(text[pos : pos + line_length - 1] + HYPHEN)
                pos += line_length - 1
            continue

        if span.end + 1 >= text_length:
            lines.append(text[pos:])
            break

        if text[span.end + 1].isspace():
            lines.append(text[pos : span.end + 1])
            pos = span.end + 1
            continue

        # The window cut the last word in half; break after the previous word
        previous_end = _find_last_non_whitespace(text, pos, span.begin - 1)
        if previous_end is None:
            # Unreachable while text[pos] is non-whitespace: a cut word that
            # starts at pos fills the window and is classified SINGLE_WORD
            pos = span.begin
            continue
        lines.append(text[pos : previous_end + 1])
        pos = previous_end + 1

    if not lines:
        return break_char
    return "".join(line + break_char for line in lines)
