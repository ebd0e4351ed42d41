"""
Search component - Case-insensitive substring search over JSON records.
"""

from ._impl import (
    DEFAULT_CONFIG,
    SearchConfig,
    parse_records,
    record_matches,
    search,
    stringify_value,
)
from .component import run
from .models import (
    InvalidArgumentError,
    ParseError,
    Record,
    SearchError,
    SearchInput,
    SearchOutput,
    SearchValidationError,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "search",
    # Input models
    "SearchInput",
    # Output models
    "SearchOutput",
    "SearchValidationError",
    "Record",
    # Errors
    "SearchError",
    "InvalidArgumentError",
    "ParseError",
    # Ports
    "RulesPort",
    # Functional core
    "SearchConfig",
    "DEFAULT_CONFIG",
    "parse_records",
    "record_matches",
    "stringify_value",
]
