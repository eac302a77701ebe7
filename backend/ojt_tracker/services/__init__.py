"""Service layer package initialization."""

from ojt_tracker.services import (
    time_calculator,
    log_keys,
    log_validator,
    log_gateway,
    log_store,
    profile_service,
    progress_service,
    export_service,
    report_service,
    draft_service,
)
