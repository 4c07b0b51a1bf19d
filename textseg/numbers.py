"""Number string extraction."""

from __future__ import annotations

from .constants import SIGN_CHARS
from .exceptions import InvalidArgumentError
from .models import ExtractionOutcome, NumberExtractionResult


def _is_digit(character: str) -> bool:
    return "0" <= character <= "9"


def _keep_list(chars: str) -> list[str]:
    return [character for character in chars if not _is_digit(character)]


def _collect_leading(
    text: str, start_index: int, first_digit: int, keep_leading: list[str]
) -> tuple[list[str], str | None]:
    """Collect kept characters immediately preceding the first digit.

    Each kept character is consumed once it matches. Capturing a sign removes
    the opposite sign from the candidates.

    Returns:
        tuple[list[str], str | None]: Captured characters in text order and
            the captured sign, if any.
    """
    captured: list[str] = []
    sign: str | None = None
    index = first_digit - 1
    while index >= start_index and text[index] in keep_leading:
        character = text[index]
        keep_leading.remove(character)
        if character in SIGN_CHARS:
            sign = character
            opposite = "+" if character == "-" else "-"
            keep_leading = [kept for kept in keep_leading if kept != opposite]
        captured.append(character)
        index -= 1
    captured.reverse()
    return captured, sign


def extract_numeric_digits(
    text: str,
    start_index: int,
    keep_leading: str = "",
    keep_interior: str = "",
    keep_trailing: str = "",
) -> NumberExtractionResult:
    """Extract the first number string at or after `start_index`.

    A number string is a run of ASCII digits. Characters listed in
    `keep_leading` that immediately precede the run are prefixed; characters
    in `keep_interior` are kept inside the run when a digit follows them; and
    characters in `keep_trailing` that immediately follow the run are
    appended. Leading and trailing characters are used at most once each, so
    ``"$$"`` must be listed twice to keep two dollar signs.

    Args:
        text: Host string to scan.
        start_index: Zero-based index where the search begins.
        keep_leading: Characters to keep before the digits, such as ``"$(-"``.
        keep_interior: Characters to keep between digits, such as ``",."``.
        keep_trailing: Characters to keep after the digits, such as ``")%"``.

    Returns:
        NumberExtractionResult: Profile of the number string, tagged
            `ExtractionOutcome.NOT_FOUND` when the text holds no digit.

    Raises:
        InvalidArgumentError: If `text` is empty or `start_index` is out of
            range.

    Examples:
        extract_numeric_digits(
            "Your bank account =$(1,250,364.33).44", 0, "$(", ",.", ")"
        ).number_text  # "$(1,250,364.33)"
    """
    if not isinstance(text, str) or not text:
        raise InvalidArgumentError("text", "the target string is empty")
    if isinstance(start_index, bool) or not isinstance(start_index, int):
        raise InvalidArgumentError("start_index", "must be an integer")
    if start_index < 0 or start_index >= len(text):
        raise InvalidArgumentError(
            "start_index",
            f"{start_index} is out of range for a string of length {len(text)}",
        )

    target_length = len(text)
    first_digit = next(
        (index for index in range(start_index, target_length) if _is_digit(text[index])),
        None,
    )
    if first_digit is None:
        return NumberExtractionResult(target_length=target_length, start_index=start_index)

    leading, sign = _collect_leading(text, start_index, first_digit, _keep_list(keep_leading))
    interior = _keep_list(keep_interior)
    trailing = _keep_list(keep_trailing)

    captured = list(leading)
    index = first_digit
    while index < target_length:
        character = text[index]
        if _is_digit(character):
            captured.append(character)
        elif (
            character in interior
            and index + 1 < target_length
            and _is_digit(text[index + 1])
        ):
            captured.append(character)
        else:
            break
        index += 1

    while index < target_length and text[index] in trailing:
        trailing.remove(text[index])
        captured.append(text[index])
        index += 1

    number_text = "".join(captured)
    number_index = first_digit - len(leading)
    next_index: int | None = number_index + len(number_text)
    if next_index >= target_length:
        next_index = None

    return NumberExtractionResult(
        target_length=target_length,
        start_index=start_index,
        number_text=number_text,
        number_index=number_index,
        number_length=len(number_text),
        leading_sign=sign,
        leading_sign_index=leading.index(sign) if sign is not None else None,
        next_index=next_index,
        outcome=ExtractionOutcome.FOUND,
    )
