"""Constants used across the textseg package."""

from __future__ import annotations

# Line wrapping
MIN_LINE_LENGTH = 5
DEFAULT_LINE_LENGTH = 80
DEFAULT_BREAK_CHAR = "\n"
HYPHEN = "-"

# Delimiter defaults for a whitespace-separated, hash-commented line
DEFAULT_LEADING_SEPARATORS = (" ", "\t")
DEFAULT_TRAILING_SEPARATORS = (" ", "\t")
DEFAULT_COMMENT_DELIMITERS = ("#",)
DEFAULT_EOL_DELIMITERS = ("\r\n", "\n")

# Numeric extraction
SIGN_CHARS = "+-"

# Limits
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
MAX_FILE_SIZE_ENV_VAR = "TEXTSEG_MAX_FILE_SIZE"
