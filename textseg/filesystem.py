"""File reading for the textseg CLI."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from .constants import DEFAULT_MAX_FILE_SIZE, MAX_FILE_SIZE_ENV_VAR


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Return the byte limit from `TEXTSEG_MAX_FILE_SIZE`, or `default` when unset.

    Raises:
        ValueError: If the variable does not hold a positive integer.
    """
    raw_limit = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if raw_limit is None:
        return default

    try:
        limit = int(raw_limit)
    except ValueError as error:
        raise ValueError(
            f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {raw_limit!r}."
        ) from error

    if limit <= 0:
        raise ValueError(f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {limit}.")
    return limit


def read_text(filepath: Path, max_size: int) -> str:
    """Read a regular UTF-8 file no larger than `max_size` bytes.

    Line endings are returned untranslated, so ``"\\r\\n"`` reaches the field
    extractor as written.

    Args:
        filepath: File to read.
        max_size: Largest accepted size in bytes.

    Returns:
        str: Whole file content.

    Raises:
        IOError: If the file cannot be accessed, is not a regular file, is
            larger than `max_size`, or holds invalid UTF-8.

    Examples:
        content = read_text(Path("zones.txt"), 1024 * 1024)
    """
    try:
        file_stat = os.stat(filepath)
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error

    if not stat.S_ISREG(file_stat.st_mode):
        raise IOError(f"{filepath} is not a regular file.")
    if file_stat.st_size > max_size:
        raise IOError(f"{filepath} exceeds the maximum allowed size of {max_size} bytes.")

    try:
        with open(filepath, "r", encoding="UTF-8", newline="") as handle:
            return handle.read()
    except UnicodeDecodeError as error:
        raise IOError(f"Invalid UTF-8 sequence in {filepath}: {error}") from error
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error
