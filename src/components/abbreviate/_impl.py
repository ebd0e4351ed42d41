"""
Number abbreviation - Functional Core.

Turns a number (or numeric string) into a short human-readable form using
magnitude suffixes: 1500000 -> "1.5M", 2000000000 -> "2B", 999 -> "999".

Invariants:
- Scales are checked largest threshold first; the first match wins
- Thresholds are compared against the signed value, so negatives never scale
- Scaled values round half away from zero at the configured decimal places
- An all-zero fractional part is dropped ("2.0" -> "2")
- Pure: no I/O, no logging, no shared mutable state
"""

from __future__ import annotations

import math
import numbers
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal

from .models import InvalidInputError

# Wide enough to hold any scaled float in fixed-point form.
_DECIMAL_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)

# Decimal float literal: ASCII digits, optional sign, fraction and exponent.
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# --- Configuration ---


@dataclass(frozen=True)
class AbbreviateConfig:
    """Abbreviation configuration from rules."""

    # (threshold, suffix) pairs, largest first
    scales: tuple[tuple[float, str], ...] = (
        (1_000_000_000, "B"),
        (1_000_000, "M"),
        (1_000, "K"),
    )

    # Decimal places kept after scaling
    decimals: int = 1


DEFAULT_CONFIG = AbbreviateConfig()


# --- Coercion ---


def coerce_number(value: object) -> float | int:
    """
    Coerce a number or numeric string to a finite number.

    Strings must be decimal float literals (surrounding whitespace ignored),
    so forms like "1_000", "inf" or non-ASCII digits are rejected. Integers
    are returned unchanged so their plain form keeps every digit.

    Raises:
        InvalidInputError: If the value is not numeric, or is NaN/infinite.
    """
    if isinstance(value, bool):
        raise InvalidInputError(value)

    if isinstance(value, str):
        text = value.strip()
        if not _FLOAT_PATTERN.fullmatch(text):
            raise InvalidInputError(value)
        number: float | int = float(text)
    elif isinstance(value, numbers.Integral):
        number = int(value)
    elif isinstance(value, numbers.Real):
        number = float(value)
    else:
        raise InvalidInputError(value)

    try:
        finite = math.isfinite(number)
    except OverflowError as e:
        raise InvalidInputError(value) from e
    if not finite:
        raise InvalidInputError(value)

    return number


# --- Formatting ---


def format_plain(number: float | int) -> str:
    """Plain string form: integral values without a decimal point, no exponent."""
    if isinstance(number, int):
        return str(number)
    if number.is_integer():
        return str(int(number))
    return format(Decimal(repr(number)), "f")


def format_scaled(scaled: float, decimals: int) -> str:
    """
    Fixed-point form of an already scaled value.

    Rounds the exact binary value half away from zero, then drops the
    fractional part when all of its digits are zero.
    """
    exponent = Decimal(1).scaleb(-decimals)
    rounded = Decimal(scaled).quantize(exponent, context=_DECIMAL_CONTEXT)
    text = f"{rounded:f}"

    whole, _, fraction = text.partition(".")
    if not fraction.strip("0"):
        return whole
    return text


def abbreviate(value: float | int | str, config: AbbreviateConfig | None = None) -> str:
    """
    Abbreviate a number based on its magnitude.

    Args:
        value: Number or numeric string.
        config: Scale table and decimal places. Uses defaults if None.

    Returns:
        Abbreviated string, e.g. "1.5M".

    Raises:
        InvalidInputError: If value is not a valid finite number.
    """
    if config is None:
        config = DEFAULT_CONFIG

    number = coerce_number(value)

    for threshold, suffix in config.scales:
        if number >= threshold:
            return format_scaled(number / threshold, config.decimals) + suffix

    return format_plain(number)
