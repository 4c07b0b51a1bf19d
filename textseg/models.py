"""Data models for textseg."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TrailingDelimiterType(Enum):
    """Reason a data field scan stopped.

    Attributes:
        UNKNOWN: No field was extracted.
        END_OF_FIELD: A trailing field separator ended the field.
        COMMENT: A comment delimiter ended the valid range.
        END_OF_LINE: An end-of-line delimiter ended the valid range.
        END_OF_STRING: The field ran to the end of the host text.
    """

    UNKNOWN = auto()
    END_OF_FIELD = auto()
    COMMENT = auto()
    END_OF_LINE = auto()
    END_OF_STRING = auto()


class ExtractionOutcome(Enum):
    """Tag distinguishing a located value from an empty scan."""

    FOUND = auto()
    NOT_FOUND = auto()


@dataclass(frozen=True)
class FieldExtractionResult:
    """Profile of a data field extracted from a host string.

    All indices are zero-based code-point offsets into the host string. Values
    that were not located are None.

    Attributes:
        target_length: Length of the host string.
        start_index: Index where the scan began, before any keyword advance.
        last_good_index: Last index eligible for field data, or None when no
            index is eligible.
        keyword_delimiter: Keyword that anchored the field, if any.
        keyword_delimiter_index: Index of the anchoring keyword.
        field_text: Extracted field, or an empty string when nothing was found.
        field_index: Index of the first field character.
        field_length: Number of characters in `field_text`.
        trailing_delimiter: Delimiter that ended the field.
        trailing_delimiter_type: Classification of `trailing_delimiter`.
        next_index: Index to resume scanning from, or None when the field
            reached `last_good_index`.
        comment_delimiter: Comment delimiter found in the valid range.
        comment_delimiter_index: Index of `comment_delimiter`.
        end_of_line_delimiter: End-of-line delimiter found after `start_index`.
        end_of_line_delimiter_index: Index of `end_of_line_delimiter`.
        outcome: Whether a field was located.
    """

    target_length: int
    start_index: int
    last_good_index: int | None = None
    keyword_delimiter: str | None = None
    keyword_delimiter_index: int | None = None
    field_text: str = ""
    field_index: int | None = None
    field_length: int = 0
    trailing_delimiter: str | None = None
    trailing_delimiter_type: TrailingDelimiterType = TrailingDelimiterType.UNKNOWN
    next_index: int | None = None
    comment_delimiter: str | None = None
    comment_delimiter_index: int | None = None
    end_of_line_delimiter: str | None = None
    end_of_line_delimiter_index: int | None = None
    outcome: ExtractionOutcome = ExtractionOutcome.NOT_FOUND

    @classmethod
    def not_found(
        cls,
        target_length: int,
        start_index: int,
        last_good_index: int | None = None,
        comment_delimiter: str | None = None,
        comment_delimiter_index: int | None = None,
        end_of_line_delimiter: str | None = None,
        end_of_line_delimiter_index: int | None = None,
    ) -> FieldExtractionResult:
        """Build an empty result that keeps only the scan context.

        Examples:
            FieldExtractionResult.not_found(target_length=12, start_index=0)
        """
        if last_good_index is not None and last_good_index < 0:
            last_good_index = None
        return cls(
            target_length=target_length,
            start_index=start_index,
            last_good_index=last_good_index,
            comment_delimiter=comment_delimiter,
            comment_delimiter_index=comment_delimiter_index,
            end_of_line_delimiter=end_of_line_delimiter,
            end_of_line_delimiter_index=end_of_line_delimiter_index,
        )

    @property
    def found(self) -> bool:
        return self.outcome is ExtractionOutcome.FOUND


@dataclass(frozen=True)
class NumberExtractionResult:
    """Profile of a number string extracted from a host string.

    Attributes:
        target_length: Length of the host string.
        start_index: Index where the search began.
        number_text: Extracted number string, or an empty string.
        number_index: Index of the first character of `number_text`.
        number_length: Number of characters in `number_text`.
        leading_sign: ``"+"`` or ``"-"`` when a kept sign precedes the digits.
        leading_sign_index: Offset of `leading_sign` inside `number_text`.
        next_index: Index following the number string, or None at end of text.
        outcome: Whether a number string was located.
    """

    target_length: int
    start_index: int
    number_text: str = ""
    number_index: int | None = None
    number_length: int = 0
    leading_sign: str | None = None
    leading_sign_index: int | None = None
    next_index: int | None = None
    outcome: ExtractionOutcome = ExtractionOutcome.NOT_FOUND

    @property
    def found(self) -> bool:
        return self.outcome is ExtractionOutcome.FOUND
