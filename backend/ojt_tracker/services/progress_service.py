"""Progress toward the required internship hours."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Iterable

from ojt_tracker.services.errors import TrackerError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Progress:
    total: int
    percent: float
    remaining: int
    goal: int


def _hours_of(log) -> int:
    if isinstance(log, Mapping):
        return int(log["hours"])
    return int(log.hours)


def recompute(logs: Iterable, goal: int) -> Progress:
    total = sum(_hours_of(log) for log in logs)
    if goal > 0:
        percent = min(max(total / goal, 0.0), 1.0)
    else:
        percent = 1.0
    return Progress(total=total, percent=percent, remaining=max(0, goal - total), goal=goal)


class ProgressTracker:
    """Recomputes progress and mirrors the total onto the intern profile."""

    def __init__(self, profiles, goal: int):
        self.profiles = profiles
        self.goal = goal

    def publish(self, user_id: int, logs: Iterable) -> Progress:
        progress = recompute(logs, self.goal)
        try:
            self.profiles.merge_profile(user_id, total_hours=progress.total)
        except TrackerError as exc:
            logger.warning("[progress] total_hours push failed for user=%s: %s", user_id, exc)
            self.profiles.record_sync_error(user_id, exc.message)
        else:
            logger.info("[progress] total_hours=%s for user=%s", progress.total, user_id)
        return progress
