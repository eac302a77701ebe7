"""Elapsed-hour arithmetic for clock-in/clock-out pairs."""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60
LUNCH_START = 12 * 60
LUNCH_END = 13 * 60
LUNCH_MINUTES = 60

SPAN_WARNING = "Time difference exceeds 24 hours. Please check your times."


@dataclass(frozen=True)
class ShiftBreakdown:
    start_minutes: int
    end_minutes: int
    elapsed_minutes: Optional[int]
    lunch_deducted: bool
    hours: Optional[int]

    @property
    def valid(self) -> bool:
        return self.hours is not None


def to_minutes(time_text: str, meridiem: str) -> int:
    """Convert ``H:MM`` plus ``AM``/``PM`` into minutes after midnight.

    PM adds twelve hours to 1..11, AM maps 12 to midnight; values already on
    the 24-hour clock (13..23) are left alone.
    """
    hour_text, minute_text = time_text.strip().split(":")
    hour = int(hour_text)
    minute = int(minute_text)
    tag = meridiem.strip().upper()
    if tag == "PM" and hour < 12:
        hour += 12
    elif tag == "AM" and hour == 12:
        hour = 0
    return hour * 60 + minute


def _round_half_up(minutes: int) -> int:
    return (minutes + 30) // 60


def describe_shift(clock_in: str, clock_out: str, in_meridiem: str, out_meridiem: str) -> ShiftBreakdown:
    start = to_minutes(clock_in, in_meridiem)
    end = to_minutes(clock_out, out_meridiem)
    elapsed = end - start
    if elapsed < 0:
        elapsed += MINUTES_PER_DAY

    if elapsed < 0 or elapsed > MINUTES_PER_DAY:
        logger.warning("[time] discarded span %s %s -> %s %s", clock_in, in_meridiem, clock_out, out_meridiem)
        return ShiftBreakdown(start, end, None, False, None)

    # End on the same timeline as start; an overnight shift may cover the
    # next day's lunch window instead of today's.
    shift_end = start + elapsed
    lunch = any(
        start <= LUNCH_START + offset and shift_end >= LUNCH_END + offset
        for offset in (0, MINUTES_PER_DAY)
    )
    if lunch:
        elapsed -= LUNCH_MINUTES
    return ShiftBreakdown(start, end, elapsed, lunch, _round_half_up(elapsed))


def compute_hours(clock_in: str, clock_out: str, in_meridiem: str, out_meridiem: str) -> Optional[int]:
    """Rounded hours worked, or ``None`` when the span cannot be a single shift."""
    return describe_shift(clock_in, clock_out, in_meridiem, out_meridiem).hours
