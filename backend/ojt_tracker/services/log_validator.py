"""Acceptance rules for a candidate attendance log."""

import re
from datetime import datetime
from typing import Optional, Sequence

from ojt_tracker.config import settings
from ojt_tracker.schemas.time_log import TimeLogCreate, TimeLogRecord
from ojt_tracker.services.errors import DuplicateLogError, TrackerValidationError
from ojt_tracker.services.log_keys import canonical_time, derive_key
from ojt_tracker.services.time_calculator import SPAN_WARNING, compute_hours

TIME_RE = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")


def is_valid_date(value: str) -> bool:
    try:
        parsed = datetime.strptime(value, "%Y/%m/%d")
    except ValueError:
        return False
    return parsed.strftime("%Y/%m/%d") == value


def is_valid_time(value: str) -> bool:
    return bool(TIME_RE.match(value))


def validate(
    candidate: TimeLogCreate,
    existing: Sequence[TimeLogRecord],
    edit_key: Optional[str] = None,
) -> TimeLogRecord:
    """Check ``candidate`` against the format, range and dedup rules.

    Rules run in order and the first failure raises with a message meant for
    the user. ``edit_key`` names the record being edited; it may keep its own
    key without tripping the duplicate check.
    """
    date = candidate.date.strip()
    clock_in = candidate.clock_in.strip()
    clock_out = candidate.clock_out.strip()

    if not date or not clock_in or not clock_out:
        raise TrackerValidationError("Please fill in all required fields.")

    if not is_valid_date(date):
        raise TrackerValidationError("Please enter a valid date in YYYY/MM/DD format.")

    if not is_valid_time(clock_in) or not is_valid_time(clock_out):
        raise TrackerValidationError("Please enter valid times in HH:MM format.")

    hours = candidate.hours
    if hours is None:
        hours = compute_hours(clock_in, clock_out, candidate.clock_in_meridiem, candidate.clock_out_meridiem)
        if hours is None:
            raise TrackerValidationError(SPAN_WARNING)

    if hours < 1 or hours > settings.MAX_LOG_HOURS:
        raise TrackerValidationError(
            f"Please enter a valid whole number of hours (1-{settings.MAX_LOG_HOURS})."
        )

    stored_in = canonical_time(clock_in, candidate.clock_in_meridiem)
    key = derive_key(date, stored_in)
    if key != edit_key and any(log.log_key == key for log in existing):
        raise DuplicateLogError("A log for this date and clock-in time already exists.")

    return TimeLogRecord(
        log_key=key,
        date=date,
        clock_in=stored_in,
        clock_out=canonical_time(clock_out, candidate.clock_out_meridiem),
        hours=hours,
    )
