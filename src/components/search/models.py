"""
Search component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# A flat JSON object: field name -> scalar value
Record = dict[str, Any]


# --- Error Types ---


class SearchError(Exception):
    """Base search error."""

    pass


class InvalidArgumentError(SearchError):
    """Search called with an unusable argument."""

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"{argument} {reason}")


class ParseError(SearchError):
    """JSON text could not be parsed into an array of records."""

    def __init__(self, reason: str = "must be a valid JSON array") -> None:
        self.reason = reason
        super().__init__(f"json_text {reason}")


@dataclass(frozen=True)
class SearchValidationError:
    """Search error reported by the shell layer."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class SearchInput:
    """Input for searching a JSON array of records."""

    json_text: str
    term: str


# --- Output Models ---


@dataclass(frozen=True)
class SearchOutput:
    """Output from a record search."""

    records: list[Record] = field(default_factory=list)
    total: int = 0
    errors: list[SearchValidationError] = field(default_factory=list)
    success: bool = True
