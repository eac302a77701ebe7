"""Request dependencies that resolve the intern and build a loaded log store."""

from fastapi import Depends, Path
from sqlalchemy.orm import Session

from ojt_tracker.database import get_db
from ojt_tracker.models.user import Intern
from ojt_tracker.services.draft_service import DraftCache
from ojt_tracker.services.log_gateway import LogGateway
from ojt_tracker.services.log_store import LogStore
from ojt_tracker.services.profile_service import ProfileService
from ojt_tracker.services.progress_service import ProgressTracker


def get_profiles(db: Session = Depends(get_db)) -> ProfileService:
    return ProfileService(db)


def get_current_intern(
    user_id: int = Path(..., ge=1),
    profiles: ProfileService = Depends(get_profiles),
) -> Intern:
    return profiles.get_intern(user_id)


def get_log_store(
    intern: Intern = Depends(get_current_intern),
    db: Session = Depends(get_db),
    profiles: ProfileService = Depends(get_profiles),
) -> LogStore:
    store = LogStore(
        intern.user_id,
        LogGateway(db),
        profiles=profiles,
        tracker=ProgressTracker(profiles, intern.required_hours),
    )
    store.load()
    return store


def get_draft_cache() -> DraftCache:
    return DraftCache()
