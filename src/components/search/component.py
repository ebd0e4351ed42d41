"""
Search component - Substring search over JSON records.

Shell Layer - builds config from rules and converts errors to output.
"""

from __future__ import annotations

from ._impl import DEFAULT_CONFIG, SearchConfig, search
from .models import (
    InvalidArgumentError,
    ParseError,
    SearchInput,
    SearchOutput,
    SearchValidationError,
)
from .ports import RulesPort


def _build_config(rules: RulesPort | None) -> SearchConfig:
    """Build search config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return SearchConfig(max_json_bytes=rules.get_max_json_bytes())


# --- Component Entry Points ---


def run(
    inp: SearchInput,
    *,
    rules: RulesPort | None = None,
) -> SearchOutput:
    """
    Search a JSON array of records for a term.

    Args:
        inp: Input containing the JSON text and search term.
        rules: Optional rules port for configuration.

    Returns:
        SearchOutput with matching records, or errors.
    """
    config = _build_config(rules)

    try:
        records = search(inp.json_text, inp.term, config)
    except InvalidArgumentError as e:
        return SearchOutput(
            errors=[
                SearchValidationError(
                    code="invalid_argument",
                    message=str(e),
                    field=e.argument,
                )
            ],
            success=False,
        )
    except ParseError as e:
        return SearchOutput(
            errors=[
                SearchValidationError(
                    code="parse_error",
                    message=str(e),
                    field="json_text",
                )
            ],
            success=False,
        )

    return SearchOutput(records=records, total=len(records))
