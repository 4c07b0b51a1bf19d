"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

from .constants import (
    DEFAULT_BREAK_CHAR,
    DEFAULT_COMMENT_DELIMITERS,
    DEFAULT_EOL_DELIMITERS,
    DEFAULT_LEADING_SEPARATORS,
    DEFAULT_LINE_LENGTH,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_TRAILING_SEPARATORS,
    MIN_LINE_LENGTH,
)

_DELIMITER_FIELDS = (
    "keyword_delimiters",
    "leading_separators",
    "trailing_separators",
    "comment_delimiters",
    "eol_delimiters",
)


@dataclass
class SegmentConfig:
    """Configuration for a field extraction and wrapping session.

    Attributes:
        keyword_delimiters: Keywords that anchor fields; empty disables anchoring.
        leading_separators: Separators skipped before a field.
        trailing_separators: Separators that end a field.
        comment_delimiters: Delimiters that start a trailing comment.
        eol_delimiters: Delimiters that end a line.
        line_length: Maximum visible characters per wrapped line.
        break_char: Character appended after each wrapped line.
        max_file_size: Maximum file size in bytes that the CLI will read.

    Examples:
        SegmentConfig(keyword_delimiters=("Zone:", "Link:"), line_length=40)
    """

    # Delimiter roles
    keyword_delimiters: tuple[str, ...] = ()
    leading_separators: tuple[str, ...] = DEFAULT_LEADING_SEPARATORS
    trailing_separators: tuple[str, ...] = DEFAULT_TRAILING_SEPARATORS
    comment_delimiters: tuple[str, ...] = DEFAULT_COMMENT_DELIMITERS
    eol_delimiters: tuple[str, ...] = DEFAULT_EOL_DELIMITERS

    # Wrapping
    line_length: int = DEFAULT_LINE_LENGTH
    break_char: str = DEFAULT_BREAK_CHAR

    # Limits
    max_file_size: int = DEFAULT_MAX_FILE_SIZE


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`line_length` must be >= 5")
    """


def load_config(search_path: Path) -> SegmentConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.textseg]`` table from `pyproject.toml` and the ``[textseg]`` or
    ``[tool.textseg]`` table from `.textseg.toml` when present. Returns
    defaults when no configuration is found. TOML files that cannot be read or
    decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        SegmentConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("data"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "textseg")]
        )
        if pyproject_config is not None:
            return normalize_config(pyproject_config)

        dotfile_config = _load_from_file(
            current / ".textseg.toml",
            table_paths=[("textseg",), ("tool", "textseg")],
        )
        if dotfile_config is not None:
            return normalize_config(dotfile_config)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return SegmentConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> SegmentConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> SegmentConfig:
    table_display = ".".join(table_path)

    if raw_config is None:
        return SegmentConfig()

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return SegmentConfig()

    try:
        return SegmentConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def normalize_config(config: SegmentConfig) -> SegmentConfig:
    """Convert delimiter lists read from TOML or the CLI into tuples."""
    changes = {}
    for name in _DELIMITER_FIELDS:
        value = getattr(config, name)
        if isinstance(value, list):
            changes[name] = tuple(value)
    if not changes:
        return config
    return replace(config, **changes)


def validate_config(config: SegmentConfig) -> None:
    """Validate a `SegmentConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If a delimiter set is malformed, a required separator set
            is empty, the line length is below the wrapping minimum, the break
            character is not a single non-null character, or the file size
            limit is not positive.

    Examples:
        validate_config(SegmentConfig(line_length=40))
    """
    config = normalize_config(config)

    for name in _DELIMITER_FIELDS:
        value = getattr(config, name)
        if not isinstance(value, tuple) or not all(isinstance(item, str) for item in value):
            raise ConfigError(f"`{name}` must be a list of strings")
        if value and not any(value):
            raise ConfigError(f"`{name}` must not consist entirely of empty strings")

    if not config.leading_separators:
        raise ConfigError("`leading_separators` must not be empty")
    if not config.trailing_separators:
        raise ConfigError("`trailing_separators` must not be empty")

    _ensure_integers({"line_length": config.line_length, "max_file_size": config.max_file_size})

    if config.line_length < MIN_LINE_LENGTH:
        raise ConfigError(f"`line_length` must be >= {MIN_LINE_LENGTH}")
    if not isinstance(config.break_char, str) or len(config.break_char) != 1:
        raise ConfigError("`break_char` must be a single character")
    if config.break_char == "\0":
        raise ConfigError("`break_char` must not be the null character")
    if config.max_file_size <= 0:
        raise ConfigError("`max_file_size` must be a positive integer")


def apply_overrides(config: SegmentConfig, **overrides: object) -> SegmentConfig:
    """Apply override values to a `SegmentConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set
            to None are ignored.

    Returns:
        SegmentConfig: New configuration with the overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `SegmentConfig`.

    Examples:
        updated = apply_overrides(config, line_length=40, keyword_delimiters=["Zone:"])
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> SegmentConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        SegmentConfig: Validated configuration.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), line_length=60)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    config = normalize_config(config)
    validate_config(config)
    return config


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
