"""Intern profile, hours goal and progress API router."""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from ojt_tracker.middleware.intern_context import get_current_intern, get_log_store, get_profiles
from ojt_tracker.models.user import Intern
from ojt_tracker.schemas.intern import InternCreate, InternOut
from ojt_tracker.schemas.time_log import GoalUpdate, ProgressOut
from ojt_tracker.services import progress_service
from ojt_tracker.services.log_store import LogStore
from ojt_tracker.services.profile_service import ProfileService

router = APIRouter(prefix="/api/interns", tags=["interns"])


@router.post("", response_model=InternOut)
def create_intern(data: InternCreate, profiles: ProfileService = Depends(get_profiles)):
    return profiles.create_intern(data)


@router.get("/{user_id}", response_model=InternOut)
def get_intern(intern: Intern = Depends(get_current_intern)):
    return intern


@router.get("/{user_id}/goal", response_model=GoalUpdate)
def get_goal(intern: Intern = Depends(get_current_intern)):
    return GoalUpdate(required_hours=intern.required_hours)


@router.put("/{user_id}/goal", response_model=ProgressOut)
def set_goal(
    data: GoalUpdate,
    intern: Intern = Depends(get_current_intern),
    profiles: ProfileService = Depends(get_profiles),
    store: LogStore = Depends(get_log_store),
):
    profiles.set_goal(intern.user_id, data.required_hours)
    progress = progress_service.recompute(store.logs, data.required_hours)
    return ProgressOut(**asdict(progress))


@router.get("/{user_id}/progress", response_model=ProgressOut)
def get_progress(
    intern: Intern = Depends(get_current_intern),
    store: LogStore = Depends(get_log_store),
):
    progress = progress_service.recompute(store.logs, intern.required_hours)
    return ProgressOut(**asdict(progress))
