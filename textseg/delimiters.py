"""Delimiter set validation and matching helpers."""

from __future__ import annotations

from collections.abc import Sequence

from .exceptions import InvalidArgumentError


def validate_delimiters(parameter: str, delimiters: Sequence[str], required: bool = False) -> None:
    """Check that a delimiter set is usable for its role.

    An empty sequence disables an optional role. A non-empty sequence made only
    of empty strings is always rejected, as is any entry that is not a string.

    Args:
        parameter: Parameter name reported in error messages.
        delimiters: Delimiter literals supplied by the caller.
        required: When True, an empty sequence is also rejected.

    Raises:
        InvalidArgumentError: If the set is unusable.

    Examples:
        validate_delimiters("comment_delimiters", ["#", "//"])
        validate_delimiters("leading_separators", [" "], required=True)
    """
    if isinstance(delimiters, str):
        raise InvalidArgumentError(parameter, "expected a sequence of strings, got a string")

    if not delimiters:
        if required:
            raise InvalidArgumentError(parameter, "at least one delimiter is required")
        return

    for delimiter in delimiters:
        if not isinstance(delimiter, str):
            raise InvalidArgumentError(parameter, f"delimiter {delimiter!r} is not a string")

    if not any(delimiters):
        raise InvalidArgumentError(parameter, "delimiters consist entirely of empty strings")


def find_earliest(
    text: str, delimiters: Sequence[str], start: int
) -> tuple[str, int] | None:
    """Locate the earliest occurrence of any delimiter at or after `start`.

    When several delimiters begin at the same index, the one listed first wins.

    Args:
        text: Host string to search.
        delimiters: Candidate delimiters; empty entries are skipped.
        start: First index to search.

    Returns:
        tuple[str, int] | None: Matching delimiter and its index, or None.

    Examples:
        find_earliest("a # b // c", ["//", "#"], 0)  # ("#", 2)
    """
    best: tuple[str, int] | None = None
    for delimiter in delimiters:
        if not delimiter:
            continue
        index = text.find(delimiter, start)
        if index == -1:
            continue
        # Strict comparison keeps the first-listed delimiter on ties
        if best is None or index < best[1]:
            best = (delimiter, index)
    return best


def match_at(text: str, index: int, delimiters: Sequence[str]) -> str | None:
    """Return the first delimiter that starts exactly at `index`.

    Examples:
        match_at("a\\tb", 1, [" ", "\\t"])  # "\\t"
    """
    for delimiter in delimiters:
        if delimiter and text.startswith(delimiter, index):
            return delimiter
    return None
