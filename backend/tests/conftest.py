import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from ojt_tracker.database import Base, get_db
from ojt_tracker.main import app
from ojt_tracker.middleware.intern_context import get_draft_cache
from ojt_tracker.models.user import Intern
from ojt_tracker.services.draft_service import DraftCache

TEST_DB_URL = "sqlite:///./test_ojt.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def draft_dir(tmp_path):
    directory = tmp_path / "drafts"
    app.dependency_overrides[get_draft_cache] = lambda: DraftCache(str(directory))
    yield directory
    app.dependency_overrides.pop(get_draft_cache, None)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_intern(db):
    intern = Intern(
        student_id="2021-00123",
        name="Juan Dela Cruz",
        email="juan@example.edu",
        company_name="Acme, Inc.",
        required_hours=300,
        total_hours=0,
    )
    db.add(intern)
    db.commit()
    db.refresh(intern)
    return intern


def log_payload(date="2024/05/01", clock_in="08:00", clock_out="05:00", **extra) -> dict:
    payload = {
        "date": date,
        "clock_in": clock_in,
        "clock_out": clock_out,
        "clock_in_meridiem": "AM",
        "clock_out_meridiem": "PM",
    }
    payload.update(extra)
    return payload
