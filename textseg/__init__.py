"""
textseg: delimited field extraction and length-bounded line wrapping.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    textseg fields tzdata.txt --keyword Zone: --keyword Link:
    textseg wrap notes.txt --width 40

Library Usage:
    from textseg import extract_field, wrap_at_length

    result = extract_field(
        " Zone:\\tAmerica/Chicago\\tLink:\\tUS/Central\\t\\n",
        ["Zone:", "Link:"],
        0,
        ["\\t", " "],
        ["\\t", " "],
        [],
        ["\\n"],
    )
    result.field_text  # "America/Chicago"

    wrap_at_length("How now brown cow", 5)  # "How\\nnow\\nbrown\\ncow\\n"
"""

from .config import ConfigError, SegmentConfig, build_config, load_config
from .exceptions import BoundaryUnderflowError, InvalidArgumentError, SegmentationError
from .extractor import extract_field, iter_fields
from .models import (
    ExtractionOutcome,
    FieldExtractionResult,
    NumberExtractionResult,
    TrailingDelimiterType,
)
from .numbers import extract_numeric_digits
from .wrapper import wrap_at_length

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "extract_field",
    "iter_fields",
    "wrap_at_length",
    "extract_numeric_digits",
    # Data models
    "ExtractionOutcome",
    "FieldExtractionResult",
    "NumberExtractionResult",
    "TrailingDelimiterType",
    # Configuration
    "SegmentConfig",
    "build_config",
    "load_config",
    # Exceptions
    "BoundaryUnderflowError",
    "ConfigError",
    "InvalidArgumentError",
    "SegmentationError",
    # Version
    "__version__",
]
