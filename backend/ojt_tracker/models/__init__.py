"""SQLAlchemy model package initialization."""

from ojt_tracker.models.user import Intern
from ojt_tracker.models.time_log import OjtLog
from ojt_tracker.models.weekly_report import WeeklyReport, WeeklyReportEntry

__all__ = [
    "Intern",
    "OjtLog",
    "WeeklyReport", "WeeklyReportEntry",
]
