"""
Abbreviate component - Human-readable magnitude abbreviation (K, M, B).
"""

from ._impl import (
    DEFAULT_CONFIG,
    AbbreviateConfig,
    abbreviate,
    coerce_number,
)
from .component import run
from .models import (
    AbbreviateError,
    AbbreviateInput,
    AbbreviateOutput,
    InvalidInputError,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "abbreviate",
    # Input models
    "AbbreviateInput",
    # Output models
    "AbbreviateOutput",
    "AbbreviateError",
    # Errors
    "InvalidInputError",
    # Ports
    "RulesPort",
    # Functional core
    "AbbreviateConfig",
    "DEFAULT_CONFIG",
    "coerce_number",
]
