"""Weekly accomplishment report schemas: entries, drafts and submissions."""

from pydantic import BaseModel, Field
from typing import Optional, List, Literal
from datetime import date, datetime

ReportStatus = Literal["submitted", "approved", "rejected"]


class ReportEntry(BaseModel):
    """A day's line in the report. Fields may be blank while the user is editing."""

    date: str = ""
    time_in: str = ""
    time_out: str = ""
    hours: Optional[int] = None
    task_completed: str = ""
    remarks: Optional[str] = None


class ReportFormInfo(BaseModel):
    student_name: str = ""
    company_name: str = ""
    supervisor_name: Optional[str] = None
    week_number: Optional[int] = None
    week_start: Optional[date] = None
    week_end: Optional[date] = None


class ReportDraft(BaseModel):
    form_info: ReportFormInfo = Field(default_factory=ReportFormInfo)
    entries: List[ReportEntry] = Field(default_factory=list)


class ReportSelectionRequest(BaseModel):
    log_keys: List[str] = Field(default_factory=list)


class ReportEntriesRequest(BaseModel):
    entries: List[ReportEntry] = Field(default_factory=list)


class ReportDocumentRequest(BaseModel):
    form_info: ReportFormInfo
    entries: List[ReportEntry] = Field(default_factory=list)


class ReportDocument(BaseModel):
    form_info: ReportFormInfo
    entries: List[ReportEntry]
    total_hours: int


class WeeklyReportEntryOut(BaseModel):
    date: str
    time_in: str
    time_out: str
    hours: int
    task_completed: str
    remarks: Optional[str] = None

    model_config = {"from_attributes": True}


class WeeklyReportOut(BaseModel):
    report_id: int
    user_id: int
    week_number: int
    week_start: date
    week_end: date
    student_name: str
    company_name: str
    supervisor_name: Optional[str] = None
    total_hours: int
    status: ReportStatus
    feedback: Optional[str] = None
    submitted_at: Optional[datetime] = None
    entries: List[WeeklyReportEntryOut] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class ReportStatusUpdate(BaseModel):
    status: ReportStatus
    feedback: Optional[str] = None
