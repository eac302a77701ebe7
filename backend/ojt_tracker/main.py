"""FastAPI application entry point. Registers middleware, error handling and API routers."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from ojt_tracker.config import settings
from ojt_tracker.database import Base, engine
import ojt_tracker.models  # noqa: F401 - registers model metadata
from ojt_tracker.routers import interns, time_logs, reports
from ojt_tracker.services.errors import TrackerError

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="OJT Tracker",
    description="Internship attendance logs, progress, CSV export and weekly reports",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(interns.router)
app.include_router(time_logs.router)
app.include_router(reports.router)


@app.exception_handler(TrackerError)
def handle_tracker_error(request: Request, exc: TrackerError):
    if exc.status_code >= 500:
        logger.warning("[api] %s %s -> %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.on_event("startup")
def ensure_schema():
    Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "OJT Tracker"}
