"""
Abbreviate component - Magnitude abbreviation of numbers.

Shell Layer - builds config from rules and converts errors to output.
"""

from __future__ import annotations

from ._impl import DEFAULT_CONFIG, AbbreviateConfig, abbreviate
from .models import (
    AbbreviateError,
    AbbreviateInput,
    AbbreviateOutput,
    InvalidInputError,
)
from .ports import RulesPort


def _build_config(rules: RulesPort | None) -> AbbreviateConfig:
    """Build abbreviation config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return AbbreviateConfig(
        scales=tuple(rules.get_scales()),
        decimals=rules.get_decimals(),
    )


# --- Component Entry Points ---


def run(
    inp: AbbreviateInput,
    *,
    rules: RulesPort | None = None,
) -> AbbreviateOutput:
    """
    Abbreviate a number.

    Args:
        inp: Input containing the value to abbreviate.
        rules: Optional rules port for configuration.

    Returns:
        AbbreviateOutput with the abbreviated text, or errors.
    """
    config = _build_config(rules)

    try:
        text = abbreviate(inp.value, config)
    except InvalidInputError as e:
        return AbbreviateOutput(
            text=None,
            errors=[AbbreviateError(code="invalid_input", message=str(e))],
            success=False,
        )

    return AbbreviateOutput(text=text)
