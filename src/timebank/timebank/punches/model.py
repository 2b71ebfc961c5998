from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..common.wallclock import LocalWallClock
from ..core.enums import PunchType


@dataclass(frozen=True)
class PunchEvent:
    """Domain entity: one clock action of one employee.

    Note: ``timestamp`` carries local wall-clock digits (see ``LocalWallClock``);
    read it through ``wall_clock`` rather than converting it.
    """

    record_id: int
    employee_id: int
    kind: PunchType
    timestamp: datetime
    is_valid: bool = True

    @property
    def wall_clock(self) -> LocalWallClock:
        return LocalWallClock.from_stored(self.timestamp)


def first_of_kind(punches: Sequence[PunchEvent], kind: PunchType) -> Optional[PunchEvent]:
    return next((p for p in punches if p.kind == kind), None)


def last_of_kind(punches: Sequence[PunchEvent], kind: PunchType) -> Optional[PunchEvent]:
    return next((p for p in reversed(punches) if p.kind == kind), None)
