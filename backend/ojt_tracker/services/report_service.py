"""Weekly accomplishment report assembly and submission."""

import logging
from datetime import date
from typing import Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ojt_tracker.models.weekly_report import WeeklyReport, WeeklyReportEntry
from ojt_tracker.schemas.report import (
    ReportDocument,
    ReportEntry,
    ReportFormInfo,
    ReportStatusUpdate,
)
from ojt_tracker.schemas.time_log import TimeLogRecord
from ojt_tracker.services.errors import NotFoundError, SyncError, TrackerValidationError

logger = logging.getLogger(__name__)


def to_report_entry(log: TimeLogRecord) -> ReportEntry:
    return ReportEntry(
        date=log.date,
        time_in=log.clock_in,
        time_out=log.clock_out,
        hours=log.hours,
        task_completed="",
        remarks=None,
    )


def from_selection(logs: Iterable[TimeLogRecord], selected_keys: Iterable[str]) -> List[ReportEntry]:
    """Entries for the selected logs, in log-list order, with the task left blank."""
    selected = set(selected_keys)
    return [to_report_entry(log) for log in logs if log.log_key in selected]


def is_export_ready(entry: ReportEntry) -> bool:
    return bool(
        entry.date.strip()
        and entry.time_in.strip()
        and entry.time_out.strip()
        and entry.hours is not None
        and entry.task_completed.strip()
    )


def finalize(entries: Iterable[ReportEntry]) -> List[ReportEntry]:
    return [entry for entry in entries if is_export_ready(entry)]


def build_document(form_info: ReportFormInfo, entries: Iterable[ReportEntry]) -> ReportDocument:
    ready = sorted(finalize(entries), key=lambda entry: entry.date)
    if not ready:
        raise TrackerValidationError("Add at least one entry with a completed task before exporting.")
    return ReportDocument(
        form_info=form_info,
        entries=ready,
        total_hours=sum(entry.hours for entry in ready),
    )


def _validate_form_info(form_info: ReportFormInfo) -> None:
    if not form_info.student_name.strip() or not form_info.company_name.strip():
        raise TrackerValidationError("Student name and company name are required.")
    if form_info.week_number is None or form_info.week_number < 1:
        raise TrackerValidationError("Please enter a valid week number.")
    if form_info.week_start is None or form_info.week_end is None:
        raise TrackerValidationError("Week start and end dates are required.")
    if form_info.week_end < form_info.week_start:
        raise TrackerValidationError("Week end date must not be before the start date.")


def submit_report(
    db: Session,
    *,
    user_id: int,
    form_info: ReportFormInfo,
    entries: Iterable[ReportEntry],
    drafts=None,
) -> WeeklyReport:
    _validate_form_info(form_info)
    document = build_document(form_info, entries)

    report = WeeklyReport(
        user_id=user_id,
        week_number=form_info.week_number,
        week_start=form_info.week_start,
        week_end=form_info.week_end,
        student_name=form_info.student_name.strip(),
        company_name=form_info.company_name.strip(),
        supervisor_name=(form_info.supervisor_name or "").strip() or None,
        total_hours=document.total_hours,
        status="submitted",
    )
    for seq, entry in enumerate(document.entries):
        report.entries.append(
            WeeklyReportEntry(
                seq=seq,
                date=entry.date,
                time_in=entry.time_in,
                time_out=entry.time_out,
                hours=entry.hours,
                task_completed=entry.task_completed.strip(),
                remarks=entry.remarks,
            )
        )
    try:
        db.add(report)
        db.commit()
        db.refresh(report)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("[report] submit failed for user=%s: %s", user_id, exc)
        raise SyncError(f"Failed to submit weekly report: {exc}") from exc

    if drafts is not None:
        drafts.clear(user_id)
    logger.info("[report] submitted report_id=%s user=%s week=%s", report.report_id, user_id, report.week_number)
    return report


def list_reports(
    db: Session,
    *,
    user_id: int,
    status: Optional[str] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> List[WeeklyReport]:
    q = db.query(WeeklyReport).filter(WeeklyReport.user_id == user_id)
    if status:
        q = q.filter(WeeklyReport.status == status)
    if start:
        q = q.filter(WeeklyReport.week_start >= start)
    if end:
        q = q.filter(WeeklyReport.week_end <= end)
    return q.order_by(WeeklyReport.submitted_at.desc(), WeeklyReport.report_id.desc()).all()


def get_report(db: Session, *, user_id: int, report_id: int) -> WeeklyReport:
    report = (
        db.query(WeeklyReport)
        .filter(WeeklyReport.report_id == report_id, WeeklyReport.user_id == user_id)
        .first()
    )
    if not report:
        raise NotFoundError("Weekly report not found.")
    return report


def review_report(db: Session, *, user_id: int, report_id: int, data: ReportStatusUpdate) -> WeeklyReport:
    report = get_report(db, user_id=user_id, report_id=report_id)
    report.status = data.status
    report.feedback = data.feedback
    db.commit()
    db.refresh(report)
    return report


def delete_report(db: Session, *, user_id: int, report_id: int) -> None:
    report = get_report(db, user_id=user_id, report_id=report_id)
    db.delete(report)
    db.commit()
