"""Report draft cache and the debounced auto-save around it.

The `/reports/draft` routes use ``DraftCache`` directly, one request per
save. ``DebounceScheduler`` and ``DraftAutoSaver`` are the client-side
helper for form editors that write drafts as the user types; they are not
wired into any route. The scheduler never starts threads: callers drive it
through ``run_due`` with whatever clock they injected.
"""

import logging
import os
import time
from pathlib import Path
from typing import Callable, List, Optional

from pydantic import ValidationError

from ojt_tracker.config import settings
from ojt_tracker.schemas.report import ReportDraft

logger = logging.getLogger(__name__)


class DraftCache:
    """One JSON file per intern holding ``{form_info, entries}``."""

    def __init__(self, directory: Optional[str] = None):
        self.directory = Path(directory or settings.DRAFT_DIR)

    def _path(self, user_id: int) -> Path:
        return self.directory / f"report_draft_{user_id}.json"

    def load(self, user_id: int) -> Optional[ReportDraft]:
        path = self._path(user_id)
        if not path.exists():
            return None
        try:
            return ReportDraft.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as exc:
            logger.warning("[draft] discarding unreadable draft for user=%s: %s", user_id, exc)
            return None

    def save(self, user_id: int, draft: ReportDraft) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(user_id)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(draft.model_dump_json(), encoding="utf-8")
        os.replace(tmp, path)

    def clear(self, user_id: int) -> None:
        self._path(user_id).unlink(missing_ok=True)


class TimerHandle:
    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class DebounceScheduler:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._pending: List[TimerHandle] = []

    def schedule(self, callback: Callable[[], None], delay: float) -> TimerHandle:
        handle = TimerHandle(self.clock() + delay, callback)
        self._pending.append(handle)
        return handle

    def run_due(self) -> int:
        """Fire every live timer whose due time has passed; returns how many ran."""
        now = self.clock()
        due = [h for h in self._pending if not h.cancelled and h.due <= now]
        self._pending = [h for h in self._pending if not h.cancelled and h.due > now]
        for handle in due:
            handle.callback()
        return len(due)

    @property
    def pending(self) -> int:
        return sum(1 for h in self._pending if not h.cancelled)


class DraftAutoSaver:
    """Saves the latest draft ``delay`` seconds after the last edit.

    A new edit cancels the pending save. ``flush`` writes immediately (app goes
    to background, user navigates away); ``submitted`` drops the draft.
    """

    def __init__(
        self,
        user_id: int,
        cache: DraftCache,
        scheduler: DebounceScheduler,
        delay: Optional[float] = None,
    ):
        self.user_id = user_id
        self.cache = cache
        self.scheduler = scheduler
        self.delay = settings.DRAFT_DEBOUNCE_SECONDS if delay is None else delay
        self._handle: Optional[TimerHandle] = None
        self._draft: Optional[ReportDraft] = None

    def start(self) -> Optional[ReportDraft]:
        self._draft = self.cache.load(self.user_id)
        return self._draft

    def edit(self, draft: ReportDraft) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._draft = draft
        self._handle = self.scheduler.schedule(self._save, self.delay)

    def flush(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if self._draft is not None:
            self._save()

    def submitted(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._draft = None
        self.cache.clear(self.user_id)

    def _save(self) -> None:
        self._handle = None
        if self._draft is None:
            return
        self.cache.save(self.user_id, self._draft)
        logger.debug("[draft] saved draft for user=%s", self.user_id)
