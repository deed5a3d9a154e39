"""Session-scoped store of assessed risk tiers.

Entries are keyed by vehicle label, so assessing a second vehicle with
the same make and model replaces the earlier tier.
"""

from __future__ import annotations

import logging
from typing import Iterator

from vehicle_risk.core.classifier import RiskLevel

logger = logging.getLogger(__name__)


class RiskRegistry:
    """Mapping from vehicle label to the most recent risk tier."""

    __slots__ = ("_levels",)

    def __init__(self) -> None:
        self._levels: dict[str, RiskLevel] = {}

    def record(self, label: str, level: RiskLevel) -> None:
        """Insert or overwrite the tier stored for ``label``."""
        if label in self._levels:
            logger.info("Overwriting risk level for %r: %s -> %s",
                        label, self._levels[label].value, level.value)
        else:
            logger.info("Recording risk level for %r: %s", label, level.value)
        self._levels[label] = level

    def get(self, label: str) -> RiskLevel | None:
        return self._levels.get(label)

    def render_all(self) -> list[tuple[str, RiskLevel]]:
        """Return every entry, ordered by label."""
        return sorted(self._levels.items(), key=lambda item: item[0])

    def format_entries(self) -> Iterator[str]:
        """Yield the display lines for every entry in :meth:`render_all` order."""
        for label, level in self.render_all():
            yield f"Vehicle: {label}"
            yield f"Risk Level: {level.value}"

    def __len__(self) -> int:
        return len(self._levels)

    def __contains__(self, label: object) -> bool:
        return label in self._levels

    def __repr__(self) -> str:
        return f"RiskRegistry(entries={len(self._levels)})"
