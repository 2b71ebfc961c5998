from __future__ import annotations

from ...core.constants import TIER2_MULTIPLIER
from .base import OvertimeSplit, OvertimeStrategy


class SundayOvertimeStrategy(OvertimeStrategy):
    """Sunday: every worked hour is x2.0."""

    def split(self, *, worked_hours: float, expected_hours: float, worked_after_22: float) -> OvertimeSplit:
        return OvertimeSplit(tier2_hours=worked_hours * TIER2_MULTIPLIER, raw_overtime_hours=worked_hours)
