from __future__ import annotations

from ...core.constants import TIER1_MULTIPLIER, TIER2_MULTIPLIER
from .base import OvertimeSplit, OvertimeStrategy


class WeekdayOvertimeStrategy(OvertimeStrategy):
    """Days with expected hours.

    Hours beyond the expected journey are overtime; the part worked after 22:00
    gets the night premium (x2.0), the rest x1.5. A shortfall becomes owed hours.
    """

    def split(self, *, worked_hours: float, expected_hours: float, worked_after_22: float) -> OvertimeSplit:
        if worked_hours < expected_hours:
            return OvertimeSplit(owed_hours=expected_hours - worked_hours)

        raw = worked_hours - expected_hours
        night = min(worked_after_22, raw)
        regular = max(0.0, raw - night)
        return OvertimeSplit(
            tier1_hours=regular * TIER1_MULTIPLIER,
            tier2_hours=night * TIER2_MULTIPLIER,
            raw_overtime_hours=raw,
        )
