"""Package-specific exception types."""

from __future__ import annotations


class SegmentationError(ValueError):
    """Base class for segmentation-related errors.

    Represents malformed input passed to one of the scanning routines.
    """


class InvalidArgumentError(SegmentationError):
    """Raised when an input parameter cannot be scanned.

    Args:
        parameter: Name of the offending parameter.
        reason: Human-readable description of the problem.
    """

    def __init__(self, parameter: str, reason: str):
        self.parameter = parameter
        self.reason = reason
        super().__init__(f"Invalid `{parameter}`: {reason}")


class BoundaryUnderflowError(SegmentationError):
    """Raised when line wrapping limits are below the supported minimum.

    Args:
        parameter: Name of the offending parameter.
        value: Value that was rejected.
    """

    def __init__(self, parameter: str, value: object):
        self.parameter = parameter
        self.value = value
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return f"`{self.parameter}` is below the supported minimum (got {self.value!r})"
