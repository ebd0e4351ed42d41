"""
Record search - Functional Core.

Case-insensitive substring search over a JSON array of flat records.

Invariants:
- Input must parse to a JSON array; anything else is a ParseError
- Matching records are returned unmodified, in input order
- Null values match as the empty string
- Array elements that are not objects have no fields and never match
- Pure: no I/O, no logging, no shared mutable state
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from .models import InvalidArgumentError, ParseError, Record

# --- Configuration ---


@dataclass(frozen=True)
class SearchConfig:
    """Search configuration from rules."""

    # Maximum JSON text size in UTF-8 bytes (None: unlimited)
    max_json_bytes: int | None = None


DEFAULT_CONFIG = SearchConfig()


# --- Parsing ---


def _reject_constant(name: str) -> float:
    # NaN/Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_records(json_text: str) -> list[Any]:
    """
    Parse JSON text that must hold an array.

    Raises:
        ParseError: On invalid JSON or a non-array top-level value.
    """
    try:
        data = json.loads(json_text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise ParseError("must be a valid JSON string") from e

    if not isinstance(data, list):
        raise ParseError()

    return data


# --- Matching ---


def _format_float(value: float) -> str:
    # Positional notation; JSON overflow such as 1e400 parses to infinity
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def stringify_value(value: Any) -> str:
    """String form of a JSON value used for matching."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def record_matches(record: Any, needle: str) -> bool:
    """Check whether any field value contains the lowercased needle."""
    if not isinstance(record, dict):
        return False
    return any(needle in stringify_value(value).lower() for value in record.values())


def search(
    json_text: str,
    term: str,
    config: SearchConfig | None = None,
) -> list[Record]:
    """
    Search for a term in a JSON array of records.

    Args:
        json_text: JSON text holding an array of flat objects.
        term: Non-empty search term, matched case-insensitively.
        config: Search limits. Uses defaults if None.

    Returns:
        Records with at least one field value containing the term,
        in input order.

    Raises:
        InvalidArgumentError: If json_text is not a string or term is not
            a non-empty string.
        ParseError: If json_text is not valid JSON or not an array.
    """
    if config is None:
        config = DEFAULT_CONFIG

    if not isinstance(json_text, str):
        raise InvalidArgumentError("json_text", "must be a valid JSON string")

    if not isinstance(term, str) or not term:
        raise InvalidArgumentError("term", "must be a non-empty string")

    if config.max_json_bytes is not None:
        size = len(json_text.encode("utf-8"))
        if size > config.max_json_bytes:
            raise InvalidArgumentError(
                "json_text",
                f"exceeds {config.max_json_bytes} bytes (got {size})",
            )

    data = parse_records(json_text)
    if not data:
        return []

    needle = term.lower()
    return [record for record in data if record_matches(record, needle)]
