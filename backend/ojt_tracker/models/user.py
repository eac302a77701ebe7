"""Intern profile SQLAlchemy model definition."""

from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ojt_tracker.database import Base


class Intern(Base):
    __tablename__ = "ojt_intern"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(String(30), unique=True, nullable=False)
    name = Column(String(100), nullable=False)
    email = Column(String(150))
    company_name = Column(String(200))
    required_hours = Column(Integer, nullable=False)
    total_hours = Column(Integer, nullable=False, default=0)
    # Last failed sync against the log collection, kept for later inspection.
    last_sync_error = Column(Text)
    last_sync_error_at = Column(DateTime)
    created_at = Column(DateTime, server_default=func.now())

    time_logs = relationship("OjtLog", back_populates="intern", cascade="all, delete-orphan")
    weekly_reports = relationship("WeeklyReport", back_populates="intern", cascade="all, delete-orphan")
