from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import PunchEvent


class PunchRepository(Protocol):
    """Punch ledger reader.

    Note (DIP): the ledger depends on this interface only; punch intake and
    storage live elsewhere.
    """

    def fetch_punches(self, employee_id: int, day_start: datetime, day_end: datetime) -> Sequence[PunchEvent]:
        """Punches with day_start <= timestamp <= day_end, ascending by timestamp."""

        raise NotImplementedError

    def list_employee_ids_with_punches(
        self,
        *,
        start: date,
        end: date,
        department: Optional[str] = None,
        employee_id: Optional[int] = None,
    ) -> Sequence[int]:
        raise NotImplementedError

    def list_entry_punches(
        self,
        *,
        start: date,
        end: date,
        department: Optional[str] = None,
    ) -> Sequence[PunchEvent]:
        """Valid ENTRY punches in the range, ascending by timestamp."""

        raise NotImplementedError
