"""Delimited data field extraction."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .delimiters import find_earliest, match_at, validate_delimiters
from .exceptions import InvalidArgumentError
from .models import ExtractionOutcome, FieldExtractionResult, TrailingDelimiterType


def _validate_arguments(
    text: str,
    keyword_delimiters: Sequence[str],
    start_index: int,
    leading_separators: Sequence[str],
    trailing_separators: Sequence[str],
    comment_delimiters: Sequence[str],
    eol_delimiters: Sequence[str],
) -> None:
    if not isinstance(text, str):
        raise InvalidArgumentError("text", f"expected a string, got {type(text).__name__}")
    if not text:
        raise InvalidArgumentError("text", "the target string is empty")

    if isinstance(start_index, bool) or not isinstance(start_index, int):
        raise InvalidArgumentError("start_index", "must be an integer")
    if start_index < 0 or start_index >= len(text):
        raise InvalidArgumentError(
            "start_index",
            f"{start_index} is out of range for a string of length {len(text)}",
        )

    validate_delimiters("leading_separators", leading_separators, required=True)
    validate_delimiters("trailing_separators", trailing_separators, required=True)
    validate_delimiters("keyword_delimiters", keyword_delimiters)
    validate_delimiters("comment_delimiters", comment_delimiters)
    validate_delimiters("eol_delimiters", eol_delimiters)


def extract_field(
    text: str,
    keyword_delimiters: Sequence[str],
    start_index: int,
    leading_separators: Sequence[str],
    trailing_separators: Sequence[str],
    comment_delimiters: Sequence[str] = (),
    eol_delimiters: Sequence[str] = (),
) -> FieldExtractionResult:
    """Extract the next data field from a line of text.

    The valid range starts at `start_index` and is narrowed, in order, by the
    earliest end-of-line delimiter and then by the earliest comment delimiter.
    When keyword delimiters are supplied, the field must follow the earliest
    keyword found in that range. Leading separators before the field are
    skipped; the field ends at the first trailing separator or at the end of
    the valid range.

    A missing keyword, an empty valid range, or a range holding only
    separators is not an error: the result is tagged
    `ExtractionOutcome.NOT_FOUND`.

    Args:
        text: Host string holding one line or record.
        keyword_delimiters: Keywords that must precede the field. An empty
            sequence disables keyword anchoring.
        start_index: Zero-based index where the scan begins.
        leading_separators: Separators skipped before the field starts.
        trailing_separators: Separators that end the field.
        comment_delimiters: Delimiters that start a trailing comment. An
            empty sequence disables comment detection.
        eol_delimiters: Delimiters that end the line. An empty sequence
            disables end-of-line detection.

    Returns:
        FieldExtractionResult: Profile of the extracted field.

    Raises:
        InvalidArgumentError: If `text` is empty, `start_index` is out of
            range, a separator set is empty, or any active delimiter set holds
            only empty strings.

    Examples:
        extract_field(
            " Zone:\\tAmerica/Chicago\\tLink:\\tUS/Central\\t\\n",
            ["Zone:", "Link:"],
            0,
            ["\\t", " "],
            ["\\t", " "],
            [],
            ["\\n"],
        ).field_text  # "America/Chicago"
    """
    _validate_arguments(
        text,
        keyword_delimiters,
        start_index,
        leading_separators,
        trailing_separators,
        comment_delimiters,
        eol_delimiters,
    )

    target_length = len(text)
    last_good_index = target_length - 1
    trailing_delimiter: str | None = None
    trailing_type = TrailingDelimiterType.UNKNOWN

    # Stage 1: end of line
    eol_delimiter: str | None = None
    eol_index: int | None = None
    eol_match = find_earliest(text, eol_delimiters, start_index)
    if eol_match is not None:
        eol_delimiter, eol_index = eol_match
        trailing_delimiter = eol_delimiter
        trailing_type = TrailingDelimiterType.END_OF_LINE
        last_good_index = min(last_good_index, eol_index - 1)

    if last_good_index < start_index:
        return FieldExtractionResult.not_found(
            target_length,
            start_index,
            last_good_index,
            end_of_line_delimiter=eol_delimiter,
            end_of_line_delimiter_index=eol_index,
        )

    # Stage 2: comments inside the remaining range
    comment_delimiter: str | None = None
    comment_index: int | None = None
    comment_match = find_earliest(text, comment_delimiters, start_index)
    if comment_match is not None and comment_match[1] <= last_good_index:
        comment_delimiter, comment_index = comment_match
        trailing_delimiter = comment_delimiter
        trailing_type = TrailingDelimiterType.COMMENT
        last_good_index = min(last_good_index, comment_index - 1)

    context = {
        "comment_delimiter": comment_delimiter,
        "comment_delimiter_index": comment_index,
        "end_of_line_delimiter": eol_delimiter,
        "end_of_line_delimiter_index": eol_index,
    }

    if last_good_index < start_index:
        return FieldExtractionResult.not_found(
            target_length, start_index, last_good_index, **context
        )

    # Stage 3: keyword anchor
    keyword: str | None = None
    keyword_index: int | None = None
    scan_index = start_index
    if keyword_delimiters:
        keyword_match = find_earliest(text, keyword_delimiters, start_index)
        if keyword_match is None or keyword_match[1] >= last_good_index:
            # Anchor absent, or it sits inside a comment or past the line end
            return FieldExtractionResult.not_found(
                target_length, start_index, last_good_index, **context
            )
        keyword, keyword_index = keyword_match
        scan_index = keyword_index + len(keyword)

    # Stage 4: main scan
    field_index: int | None = None
    index = scan_index
    while index <= last_good_index:
        if field_index is None:
            separator = match_at(text, index, leading_separators)
            if separator is not None:
                index += len(separator)
                continue
            field_index = index
        else:
            separator = match_at(text, index, trailing_separators)
            if separator is not None:
                trailing_delimiter = separator
                trailing_type = TrailingDelimiterType.END_OF_FIELD
                break
        index += 1

    if field_index is None:
        return FieldExtractionResult.not_found(
            target_length, start_index, last_good_index, **context
        )

    if trailing_type is TrailingDelimiterType.UNKNOWN:
        trailing_type = TrailingDelimiterType.END_OF_STRING

    field_text = text[field_index:index]
    next_index: int | None = field_index + len(field_text)
    if next_index > last_good_index:
        next_index = None

    return FieldExtractionResult(
        target_length=target_length,
        start_index=start_index,
        last_good_index=last_good_index,
        keyword_delimiter=keyword,
        keyword_delimiter_index=keyword_index,
        field_text=field_text,
        field_index=field_index,
        field_length=len(field_text),
        trailing_delimiter=trailing_delimiter,
        trailing_delimiter_type=trailing_type,
        next_index=next_index,
        outcome=ExtractionOutcome.FOUND,
        **context,
    )


def iter_fields(
    text: str,
    keyword_delimiters: Sequence[str],
    leading_separators: Sequence[str],
    trailing_separators: Sequence[str],
    comment_delimiters: Sequence[str] = (),
    eol_delimiters: Sequence[str] = (),
    start_index: int = 0,
) -> Iterator[FieldExtractionResult]:
    """Yield successive fields from one line.

    Resumes each scan at the previous result's `next_index` and stops at the
    first empty result or when the line is exhausted.

    Raises:
        InvalidArgumentError: Propagated from `extract_field`.

    Examples:
        [r.field_text for r in iter_fields("abc   def", [], [" "], [" "])]
        # ["abc", "def"]
    """
    index: int | None = start_index
    while index is not None:
        result = extract_field(
            text,
            keyword_delimiters,
            index,
            leading_separators,
            trailing_separators,
            comment_delimiters,
            eol_delimiters,
        )
        if not result.found:
            return
        yield result
        index = result.next_index
