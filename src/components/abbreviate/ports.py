"""
Abbreviate component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for accessing abbreviation rules configuration."""

    def get_scales(self) -> list[tuple[float, str]]:
        """Get (threshold, suffix) pairs, largest threshold first."""
        ...

    def get_decimals(self) -> int:
        """Get number of decimal places kept after scaling."""
        ...
