from dataclasses import dataclass
from datetime import datetime, timedelta

from .enums import ReviewResult
from ..config import CORRECT_INTERVALS, HOLD_RETRY, MAX_INTERVAL, WRONG_RETRY


@dataclass(frozen=True)
class ScheduleState:
    streak: int
    next_due_at: datetime


def interval_for_streak(streak: int) -> timedelta:
    return CORRECT_INTERVALS.get(streak, MAX_INTERVAL)


def next_state(current_streak: int, result: ReviewResult, now: datetime) -> ScheduleState:
    # result is validated earlier
    if result == ReviewResult.WRONG:
        return ScheduleState(streak=0, next_due_at=now + WRONG_RETRY)

    if result == ReviewResult.HOLD:
        return ScheduleState(streak=0, next_due_at=now + HOLD_RETRY)

    # Corrupted negative streaks count as a fresh start
    streak = max(int(current_streak), 0) + 1
    return ScheduleState(streak=streak, next_due_at=now + interval_for_streak(streak))
