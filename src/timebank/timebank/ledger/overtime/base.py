from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class OvertimeSplit:
    """Overtime of one day; tier values are already multiplier-weighted."""

    tier1_hours: float = 0.0
    tier2_hours: float = 0.0
    owed_hours: float = 0.0
    raw_overtime_hours: float = 0.0

    @property
    def overtime_hours(self) -> float:
        return self.tier1_hours + self.tier2_hours


class OvertimeStrategy(ABC):
    """Strategy Pattern: encapsulate how a day's worked time becomes overtime or debt."""

    @abstractmethod
    def split(self, *, worked_hours: float, expected_hours: float, worked_after_22: float) -> OvertimeSplit:
        raise NotImplementedError
