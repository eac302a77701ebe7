"""Intern profile records: hours goal, mirrored total and sync diagnostics."""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ojt_tracker.config import settings
from ojt_tracker.models.user import Intern
from ojt_tracker.schemas.intern import InternCreate
from ojt_tracker.services.errors import NotFoundError, SyncError, TrackerValidationError

logger = logging.getLogger(__name__)

PROFILE_FIELDS = {"name", "email", "company_name", "required_hours", "total_hours"}


class ProfileService:
    def __init__(self, db: Session):
        self.db = db

    def get_intern(self, user_id: int) -> Intern:
        intern = self.db.query(Intern).filter(Intern.user_id == user_id).first()
        if not intern:
            raise NotFoundError("Intern not found.")
        return intern

    def create_intern(self, data: InternCreate) -> Intern:
        exists = self.db.query(Intern).filter(Intern.student_id == data.student_id).first()
        if exists:
            raise TrackerValidationError(f"Student ID '{data.student_id}' is already registered.")
        intern = Intern(
            student_id=data.student_id,
            name=data.name,
            email=data.email,
            company_name=data.company_name,
            required_hours=data.required_hours or settings.DEFAULT_REQUIRED_HOURS,
            total_hours=0,
        )
        self.db.add(intern)
        self.db.commit()
        self.db.refresh(intern)
        return intern

    def merge_profile(self, user_id: int, **fields) -> Intern:
        """Write only the given fields onto the profile row."""
        unknown = set(fields) - PROFILE_FIELDS
        if unknown:
            raise ValueError(f"Unknown profile fields: {sorted(unknown)}")
        try:
            intern = self.get_intern(user_id)
            for name, value in fields.items():
                setattr(intern, name, value)
            self.db.commit()
            self.db.refresh(intern)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise SyncError(f"Failed to update profile: {exc}") from exc
        return intern

    def set_goal(self, user_id: int, required_hours: int) -> Intern:
        if required_hours is None or required_hours <= 0:
            raise TrackerValidationError("Please enter a valid number of hours.")
        return self.merge_profile(user_id, required_hours=required_hours)

    def record_sync_error(self, user_id: int, message: str) -> None:
        """Best-effort diagnostic note; a failure here is logged and dropped."""
        try:
            intern = self.db.query(Intern).filter(Intern.user_id == user_id).first()
            if intern is None:
                return
            intern.last_sync_error = message
            intern.last_sync_error_at = datetime.now(timezone.utc).replace(tzinfo=None)
            self.db.commit()
        except Exception as exc:
            self.db.rollback()
            logger.error("[profile] failed to record sync error for user=%s: %s", user_id, exc)
