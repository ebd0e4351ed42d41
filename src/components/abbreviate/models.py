"""
Abbreviate component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Error Types ---


class InvalidInputError(ValueError):
    """Value cannot be coerced to a finite number."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid input {value!r}. Please provide a valid number.")


@dataclass(frozen=True)
class AbbreviateError:
    """Abbreviation error reported by the shell layer."""

    code: str
    message: str


# --- Input Models ---


@dataclass(frozen=True)
class AbbreviateInput:
    """Input for abbreviating a number or numeric string."""

    value: float | int | str


# --- Output Models ---


@dataclass(frozen=True)
class AbbreviateOutput:
    """Output from abbreviation."""

    text: str | None
    errors: list[AbbreviateError] = field(default_factory=list)
    success: bool = True
