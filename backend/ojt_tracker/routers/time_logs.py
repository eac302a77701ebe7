"""Attendance log API router: CRUD, paging, hours preview and CSV export."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from ojt_tracker.config import settings
from ojt_tracker.middleware.intern_context import get_current_intern, get_log_store
from ojt_tracker.models.user import Intern
from ojt_tracker.schemas.time_log import (
    HoursPreviewOut,
    HoursPreviewRequest,
    TimeLogCreate,
    TimeLogOut,
    TimeLogPage,
)
from ojt_tracker.services import export_service
from ojt_tracker.services.errors import TrackerValidationError
from ojt_tracker.services.log_store import LogStore
from ojt_tracker.services.log_validator import is_valid_time
from ojt_tracker.services.time_calculator import SPAN_WARNING, describe_shift

router = APIRouter(prefix="/api/interns/{user_id}/logs", tags=["time-logs"])


@router.get("", response_model=TimeLogPage)
def list_logs(
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, ge=1, le=100),
    store: LogStore = Depends(get_log_store),
):
    return store.list(page, page_size or settings.LOG_PAGE_SIZE)


@router.post("", response_model=TimeLogOut)
def create_log(data: TimeLogCreate, store: LogStore = Depends(get_log_store)):
    return store.upsert(data)


@router.put("/{log_key}", response_model=TimeLogOut)
def update_log(log_key: str, data: TimeLogCreate, store: LogStore = Depends(get_log_store)):
    return store.upsert(data, edit_key=log_key)


@router.delete("/{log_key}")
def delete_log(log_key: str, store: LogStore = Depends(get_log_store)):
    store.delete(log_key)
    return {"message": "Time log deleted."}


@router.post("/hours-preview", response_model=HoursPreviewOut)
def preview_hours(data: HoursPreviewRequest, intern: Intern = Depends(get_current_intern)):
    if not is_valid_time(data.clock_in.strip()) or not is_valid_time(data.clock_out.strip()):
        raise TrackerValidationError("Please enter valid times in HH:MM format.")
    shift = describe_shift(data.clock_in, data.clock_out, data.clock_in_meridiem, data.clock_out_meridiem)
    return HoursPreviewOut(
        hours=shift.hours,
        elapsed_minutes=shift.elapsed_minutes,
        lunch_deducted=shift.lunch_deducted,
        warning=None if shift.valid else SPAN_WARNING,
    )


@router.get("/export.csv")
def export_csv(
    intern: Intern = Depends(get_current_intern),
    store: LogStore = Depends(get_log_store),
):
    csv_text = export_service.to_csv(store.logs, export_service.identity_for(intern))
    filename = export_service.export_filename()
    return Response(
        content=csv_text.encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
