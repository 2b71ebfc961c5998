from __future__ import annotations

from ...core.constants import TIER1_MULTIPLIER, TIER2_MULTIPLIER
from .base import OvertimeSplit, OvertimeStrategy


class SaturdayOvertimeStrategy(OvertimeStrategy):
    """Saturday: everything is overtime, x1.5 before 22:00 and x2.0 after."""

    def split(self, *, worked_hours: float, expected_hours: float, worked_after_22: float) -> OvertimeSplit:
        night = min(worked_after_22, worked_hours)
        before = max(0.0, worked_hours - night)
        return OvertimeSplit(
            tier1_hours=before * TIER1_MULTIPLIER,
            tier2_hours=night * TIER2_MULTIPLIER,
            raw_overtime_hours=worked_hours,
        )
