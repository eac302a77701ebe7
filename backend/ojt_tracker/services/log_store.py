"""Authoritative log list for one intern.

All mutations go through ``LogStore`` so the dedup invariant and the
reload-after-write rule hold in one place. The in-memory list is either the
pre-mutation list or a fresh reload from the gateway, never a half-applied
local edit.
"""

import logging
import math
from typing import List, Optional

from ojt_tracker.schemas.time_log import TimeLogCreate, TimeLogOut, TimeLogPage, TimeLogRecord
from ojt_tracker.services import log_validator
from ojt_tracker.services.errors import NotFoundError, SyncError, TrackerError, TrackerValidationError
from ojt_tracker.services.progress_service import Progress, ProgressTracker
from ojt_tracker.services.time_calculator import to_minutes

logger = logging.getLogger(__name__)


def _sort_key(log: TimeLogRecord):
    time_text, meridiem = log.clock_in.split(" ")
    return log.date, to_minutes(time_text, meridiem)


def sort_logs(logs: List[TimeLogRecord], descending: bool = True) -> List[TimeLogRecord]:
    return sorted(logs, key=_sort_key, reverse=descending)


class LogStore:
    def __init__(self, user_id: int, gateway, profiles=None, tracker: Optional[ProgressTracker] = None):
        self.user_id = user_id
        self.gateway = gateway
        self.profiles = profiles
        self.tracker = tracker
        self.logs: List[TimeLogRecord] = []
        self.progress: Optional[Progress] = None

    def load(self) -> List[TimeLogRecord]:
        self.logs = sort_logs(self.gateway.list_logs(self.user_id))
        return self.logs

    def find(self, log_key: str) -> Optional[TimeLogRecord]:
        return next((log for log in self.logs if log.log_key == log_key), None)

    def upsert(self, candidate: TimeLogCreate, edit_key: Optional[str] = None) -> TimeLogRecord:
        if edit_key is not None and self.find(edit_key) is None:
            raise NotFoundError("Time log not found.")

        record = log_validator.validate(candidate, self.logs, edit_key=edit_key)
        replaces = edit_key if edit_key and edit_key != record.log_key else None

        snapshot = list(self.logs)
        try:
            saved = self.gateway.set_log(
                self.user_id,
                record,
                expected_revision=candidate.expected_revision,
                replaces=replaces,
            )
            self.load()
        except TrackerError as exc:
            self.logs = snapshot
            self._note_failure("save", exc)
            raise

        self._after_mutation()
        return saved

    def delete(self, log_key: str) -> None:
        if self.find(log_key) is None:
            raise NotFoundError("Time log not found.")

        snapshot = list(self.logs)
        try:
            self.gateway.delete_log(self.user_id, log_key)
            self.load()
        except TrackerError as exc:
            self.logs = snapshot
            self._note_failure("delete", exc)
            raise

        self._after_mutation()

    def list(self, page: int = 1, page_size: int = 10) -> TimeLogPage:
        if page < 1 or page_size < 1:
            raise TrackerValidationError("Page and page size must be positive.")
        offset = (page - 1) * page_size
        window = self.logs[offset:offset + page_size]
        return TimeLogPage(
            items=[TimeLogOut(**log.model_dump()) for log in window],
            page=page,
            page_size=page_size,
            total_items=len(self.logs),
            total_pages=max(1, math.ceil(len(self.logs) / page_size)),
        )

    def _note_failure(self, action: str, exc: TrackerError) -> None:
        logger.error("[logs] %s failed for user=%s: %s", action, self.user_id, exc.message)
        if isinstance(exc, SyncError) and self.profiles is not None:
            self.profiles.record_sync_error(self.user_id, exc.message)

    def _after_mutation(self) -> None:
        if self.tracker is not None:
            self.progress = self.tracker.publish(self.user_id, self.logs)
