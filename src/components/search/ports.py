"""
Search component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for accessing search rules configuration."""

    def get_max_json_bytes(self) -> int | None:
        """Get maximum accepted JSON text size in bytes (None for no limit)."""
        ...
