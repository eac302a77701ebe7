"""Initialize the database - creates all tables, optionally with a demo intern."""
import argparse
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ojt_tracker.database import engine, Base, SessionLocal
import ojt_tracker.models  # noqa: F401 - registers all models
from ojt_tracker.models.user import Intern
from ojt_tracker.schemas.time_log import TimeLogCreate
from ojt_tracker.services.log_gateway import LogGateway
from ojt_tracker.services.log_store import LogStore
from ojt_tracker.services.profile_service import ProfileService
from ojt_tracker.services.progress_service import ProgressTracker

DEMO_DAYS = ["2024/05/01", "2024/05/02", "2024/05/03"]


def seed_demo(db):
    intern = db.query(Intern).filter(Intern.student_id == "demo-0001").first()
    if intern:
        print(f"Demo intern already exists (user_id={intern.user_id}).")
        return
    profiles = ProfileService(db)
    intern = Intern(student_id="demo-0001", name="Demo Intern", email="demo@example.edu",
                    company_name="Demo Company", required_hours=300, total_hours=0)
    db.add(intern)
    db.commit()
    db.refresh(intern)

    store = LogStore(intern.user_id, LogGateway(db), profiles=profiles,
                     tracker=ProgressTracker(profiles, intern.required_hours))
    store.load()
    for day in DEMO_DAYS:
        store.upsert(TimeLogCreate(date=day, clock_in="08:00", clock_out="05:00"))
    print(f"Demo intern created (user_id={intern.user_id}) with {len(store.logs)} logs.")


def init_db(reset: bool = False, demo: bool = False):
    if reset:
        print("Dropping all database tables...")
        Base.metadata.drop_all(bind=engine)
    print("Creating all database tables...")
    Base.metadata.create_all(bind=engine)
    if demo:
        db = SessionLocal()
        try:
            seed_demo(db)
        finally:
            db.close()
    print("Database initialized successfully.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--reset", action="store_true", help="drop existing tables first")
    parser.add_argument("--demo", action="store_true", help="create a demo intern with sample logs")
    args = parser.parse_args()
    init_db(reset=args.reset, demo=args.demo)
