"""
Load failure types.

Every failure on the read/parse/fetch path is raised as one of these and
turned into a failed load state by the session. Nothing else should escape
the data_formats package.
"""

from __future__ import annotations

from typing import Any

DEFAULT_READ_ERROR = "error reading file"

_JSON_TYPE_NAMES = {
    dict: "object",
    str: "string",
    bool: "boolean",
    int: "number",
    float: "number",
    type(None): "null",
}


class LoadError(Exception):
    """Base class for dataset load failures.

    Attributes:
        reason: Human-readable description shown to the user.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason or DEFAULT_READ_ERROR
        super().__init__(self.reason)


class ShapeError(LoadError):
    """The parsed payload is not a sequence of records."""

    def __init__(self, value: Any = None) -> None:
        type_name = _JSON_TYPE_NAMES.get(type(value), type(value).__name__)
        super().__init__(f"expected a sequence of records (got {type_name})")


class TransportError(LoadError):
    """A remote retrieval failed or returned a non-success status."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(reason)


class ParseError(LoadError):
    """The content could not be read or parsed."""

    @classmethod
    def from_exception(cls, error: BaseException) -> "ParseError":
        """Wrap an unexpected exception, keeping its description."""
        return cls(str(error))


def ensure_sequence(data: Any) -> list[Any]:
    """Return data if it is a list of records, raise ShapeError otherwise."""
    if not isinstance(data, list):
        raise ShapeError(data)
    return data
