"""
Rules adapter - exposes loaded rules through the component ports.
"""

from __future__ import annotations

from src.rules.models import Rules


class RulesAdapter:
    """Adapter implementing the abbreviate and search RulesPorts."""

    def __init__(self, rules: Rules) -> None:
        self._rules = rules

    def get_scales(self) -> list[tuple[float, str]]:
        """Get (threshold, suffix) pairs, largest threshold first."""
        return [(scale.threshold, scale.suffix) for scale in self._rules.abbreviate.scales]

    def get_decimals(self) -> int:
        """Get number of decimal places kept after scaling."""
        return self._rules.abbreviate.decimals

    def get_max_json_bytes(self) -> int | None:
        """Get maximum accepted JSON text size in bytes."""
        return self._rules.search.max_json_bytes
