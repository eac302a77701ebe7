"""Pydantic schemas for attendance log requests, responses and stored records."""

from pydantic import BaseModel, Field
from typing import Optional, List, Literal

Meridiem = Literal["AM", "PM"]

DATE_PATTERN = r"^\d{4}/\d{2}/\d{2}$"
STORED_TIME_PATTERN = r"^\d{2}:\d{2} (AM|PM)$"


class TimeLogRecord(BaseModel):
    """One stored attendance record as decoded from the log collection."""

    log_key: str = Field(min_length=1, max_length=40)
    date: str = Field(pattern=DATE_PATTERN)
    clock_in: str = Field(pattern=STORED_TIME_PATTERN)
    clock_out: str = Field(pattern=STORED_TIME_PATTERN)
    hours: int = Field(ge=1, le=24)
    revision: int = Field(default=1, ge=1)

    model_config = {"from_attributes": True, "frozen": True}


class TimeLogCreate(BaseModel):
    date: str = ""
    clock_in: str = ""
    clock_out: str = ""
    clock_in_meridiem: Meridiem = "AM"
    clock_out_meridiem: Meridiem = "PM"
    # Left empty to use the computed value.
    hours: Optional[int] = None
    expected_revision: Optional[int] = None


class TimeLogOut(BaseModel):
    log_key: str
    date: str
    clock_in: str
    clock_out: str
    hours: int
    revision: int

    model_config = {"from_attributes": True}


class TimeLogPage(BaseModel):
    items: List[TimeLogOut]
    page: int
    page_size: int
    total_items: int
    total_pages: int


class HoursPreviewRequest(BaseModel):
    clock_in: str
    clock_out: str
    clock_in_meridiem: Meridiem = "AM"
    clock_out_meridiem: Meridiem = "PM"


class HoursPreviewOut(BaseModel):
    hours: Optional[int] = None
    elapsed_minutes: Optional[int] = None
    lunch_deducted: bool = False
    warning: Optional[str] = None


class ProgressOut(BaseModel):
    total: int
    percent: float
    remaining: int
    goal: int


class GoalUpdate(BaseModel):
    required_hours: int
