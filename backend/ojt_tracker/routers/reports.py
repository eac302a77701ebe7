"""Weekly accomplishment report API router."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ojt_tracker.database import get_db
from ojt_tracker.middleware.intern_context import get_current_intern, get_draft_cache, get_log_store
from ojt_tracker.models.user import Intern
from ojt_tracker.schemas.report import (
    ReportDocument,
    ReportDocumentRequest,
    ReportDraft,
    ReportEntriesRequest,
    ReportEntry,
    ReportSelectionRequest,
    ReportStatus,
    ReportStatusUpdate,
    WeeklyReportOut,
)
from ojt_tracker.services import report_service
from ojt_tracker.services.draft_service import DraftCache
from ojt_tracker.services.log_store import LogStore

router = APIRouter(prefix="/api/interns/{user_id}/reports", tags=["reports"])


@router.post("/from-selection", response_model=List[ReportEntry])
def entries_from_selection(data: ReportSelectionRequest, store: LogStore = Depends(get_log_store)):
    return report_service.from_selection(store.logs, data.log_keys)


@router.post("/finalize", response_model=List[ReportEntry])
def finalize_entries(data: ReportEntriesRequest, intern: Intern = Depends(get_current_intern)):
    return report_service.finalize(data.entries)


@router.post("/document", response_model=ReportDocument)
def build_document(data: ReportDocumentRequest, intern: Intern = Depends(get_current_intern)):
    return report_service.build_document(data.form_info, data.entries)


@router.get("/draft", response_model=Optional[ReportDraft])
def get_draft(intern: Intern = Depends(get_current_intern), drafts: DraftCache = Depends(get_draft_cache)):
    return drafts.load(intern.user_id)


@router.put("/draft", response_model=ReportDraft)
def save_draft(
    data: ReportDraft,
    intern: Intern = Depends(get_current_intern),
    drafts: DraftCache = Depends(get_draft_cache),
):
    drafts.save(intern.user_id, data)
    return data


@router.delete("/draft")
def clear_draft(intern: Intern = Depends(get_current_intern), drafts: DraftCache = Depends(get_draft_cache)):
    drafts.clear(intern.user_id)
    return {"message": "Draft cleared."}


@router.post("", response_model=WeeklyReportOut)
def submit_report(
    data: ReportDocumentRequest,
    intern: Intern = Depends(get_current_intern),
    drafts: DraftCache = Depends(get_draft_cache),
    db: Session = Depends(get_db),
):
    return report_service.submit_report(
        db,
        user_id=intern.user_id,
        form_info=data.form_info,
        entries=data.entries,
        drafts=drafts,
    )


@router.get("", response_model=List[WeeklyReportOut])
def list_reports(
    status: Optional[ReportStatus] = Query(None),
    start: Optional[date] = Query(None),
    end: Optional[date] = Query(None),
    intern: Intern = Depends(get_current_intern),
    db: Session = Depends(get_db),
):
    return report_service.list_reports(db, user_id=intern.user_id, status=status, start=start, end=end)


@router.get("/{report_id}", response_model=WeeklyReportOut)
def get_report(report_id: int, intern: Intern = Depends(get_current_intern), db: Session = Depends(get_db)):
    return report_service.get_report(db, user_id=intern.user_id, report_id=report_id)


@router.patch("/{report_id}/status", response_model=WeeklyReportOut)
def review_report(
    report_id: int,
    data: ReportStatusUpdate,
    intern: Intern = Depends(get_current_intern),
    db: Session = Depends(get_db),
):
    return report_service.review_report(db, user_id=intern.user_id, report_id=report_id, data=data)


@router.delete("/{report_id}")
def delete_report(report_id: int, intern: Intern = Depends(get_current_intern), db: Session = Depends(get_db)):
    report_service.delete_report(db, user_id=intern.user_id, report_id=report_id)
    return {"message": "Weekly report deleted."}
