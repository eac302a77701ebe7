"""Keyed access to one intern's log collection.

Rows are decoded into ``TimeLogRecord`` on the way out so malformed data is
rejected here instead of travelling into the store. Database failures are
rolled back and re-raised as ``SyncError``.
"""

import logging
from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ojt_tracker.models.time_log import OjtLog
from ojt_tracker.schemas.time_log import TimeLogRecord
from ojt_tracker.services.errors import RevisionConflictError, SyncError, TrackerValidationError
from ojt_tracker.services.log_keys import derive_key

logger = logging.getLogger(__name__)


class LogGateway:
    """Log collection backed by the ``ojt_log`` table."""

    def __init__(self, db: Session):
        self.db = db

    def _decode(self, row: OjtLog) -> TimeLogRecord:
        try:
            record = TimeLogRecord.model_validate(row)
        except ValidationError as exc:
            logger.error("[logs] malformed record user=%s key=%s: %s", row.user_id, row.log_key, exc)
            raise TrackerValidationError(f"Stored log '{row.log_key}' is malformed.") from exc
        if derive_key(record.date, record.clock_in) != record.log_key:
            raise TrackerValidationError(f"Stored log '{row.log_key}' does not match its date and clock-in time.")
        return record

    def _row(self, user_id: int, log_key: str) -> Optional[OjtLog]:
        return (
            self.db.query(OjtLog)
            .filter(OjtLog.user_id == user_id, OjtLog.log_key == log_key)
            .first()
        )

    def _fail(self, action: str, user_id: int, exc: Exception) -> SyncError:
        self.db.rollback()
        logger.error("[logs] %s failed for user=%s: %s", action, user_id, exc)
        return SyncError(f"Failed to {action}: {exc}")

    def list_logs(self, user_id: int) -> List[TimeLogRecord]:
        try:
            rows = self.db.query(OjtLog).filter(OjtLog.user_id == user_id).all()
        except SQLAlchemyError as exc:
            raise self._fail("load time logs", user_id, exc) from exc
        return [self._decode(row) for row in rows]

    def get_log(self, user_id: int, log_key: str) -> Optional[TimeLogRecord]:
        try:
            row = self._row(user_id, log_key)
        except SQLAlchemyError as exc:
            raise self._fail("load time log", user_id, exc) from exc
        return self._decode(row) if row else None

    def set_log(
        self,
        user_id: int,
        record: TimeLogRecord,
        expected_revision: Optional[int] = None,
        replaces: Optional[str] = None,
    ) -> TimeLogRecord:
        """Write ``record`` under its key, overwriting any row with that key.

        ``replaces`` removes a previous key in the same transaction when an edit
        changes the date or clock-in time. When ``expected_revision`` is given
        the write only lands if the target row still has that revision.
        """
        try:
            guarded_key = replaces or record.log_key
            guarded = self._row(user_id, guarded_key)
            if expected_revision is not None:
                current = guarded.revision if guarded else None
                if current != expected_revision:
                    raise RevisionConflictError(
                        "This log was changed elsewhere. Reload the logs and try again."
                    )

            if replaces and guarded is not None:
                self.db.delete(guarded)
                self.db.flush()

            row = self._row(user_id, record.log_key)
            if row is None:
                row = OjtLog(user_id=user_id, log_key=record.log_key, revision=1)
                self.db.add(row)
            else:
                row.revision = (row.revision or 0) + 1
            row.date = record.date
            row.clock_in = record.clock_in
            row.clock_out = record.clock_out
            row.hours = record.hours
            self.db.commit()
            self.db.refresh(row)
        except RevisionConflictError:
            self.db.rollback()
            raise
        except SQLAlchemyError as exc:
            raise self._fail("save time log", user_id, exc) from exc
        logger.info("[logs] saved user=%s key=%s revision=%s", user_id, row.log_key, row.revision)
        return self._decode(row)

    def delete_log(self, user_id: int, log_key: str) -> bool:
        try:
            row = self._row(user_id, log_key)
            if row is None:
                return False
            self.db.delete(row)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail("delete time log", user_id, exc) from exc
        logger.info("[logs] deleted user=%s key=%s", user_id, log_key)
        return True
