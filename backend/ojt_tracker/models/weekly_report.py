"""Submitted weekly accomplishment report models."""

from sqlalchemy import Column, Integer, String, Date, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ojt_tracker.database import Base


class WeeklyReport(Base):
    __tablename__ = "weekly_report"

    report_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("ojt_intern.user_id"), nullable=False)
    week_number = Column(Integer, nullable=False)
    week_start = Column(Date, nullable=False)
    week_end = Column(Date, nullable=False)
    student_name = Column(String(100), nullable=False)
    company_name = Column(String(200), nullable=False)
    supervisor_name = Column(String(100))
    total_hours = Column(Integer, nullable=False, default=0)
    status = Column(String(20), nullable=False, default="submitted")  # submitted/approved/rejected
    feedback = Column(Text)
    submitted_at = Column(DateTime, server_default=func.now())

    intern = relationship("Intern", back_populates="weekly_reports")
    entries = relationship(
        "WeeklyReportEntry",
        back_populates="report",
        cascade="all, delete-orphan",
        order_by="WeeklyReportEntry.seq",
    )


class WeeklyReportEntry(Base):
    __tablename__ = "weekly_report_entry"

    entry_id = Column(Integer, primary_key=True, autoincrement=True)
    report_id = Column(Integer, ForeignKey("weekly_report.report_id", ondelete="CASCADE"), nullable=False)
    seq = Column(Integer, nullable=False, default=0)
    date = Column(String(10), nullable=False)
    time_in = Column(String(8), nullable=False)
    time_out = Column(String(8), nullable=False)
    hours = Column(Integer, nullable=False)
    task_completed = Column(Text, nullable=False)
    remarks = Column(Text)

    report = relationship("WeeklyReport", back_populates="entries")
