from __future__ import annotations

from enum import Enum
from typing import Sequence


class DayState(Enum):
    MET = "met"
    MISSED = "missed"
    FUTURE = "future"
    TODAY = "today"


def classify_days(daily_record: Sequence[int], goal: int, total_days: int = 365) -> list[DayState]:
    """Return one state per day-of-year slot.

    The last recorded day is always TODAY regardless of its step count.
    Slots past the record are FUTURE.
    """
    today_index = len(daily_record) - 1
    states: list[DayState] = []
    for i in range(total_days):
        if i == today_index:
            states.append(DayState.TODAY)
        elif i < len(daily_record):
            states.append(DayState.MET if daily_record[i] >= goal else DayState.MISSED)
        else:
            states.append(DayState.FUTURE)
    return states
