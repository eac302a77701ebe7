"""Per-intern attendance log model, keyed by the derived log key."""

from sqlalchemy import Column, Integer, DateTime, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ojt_tracker.database import Base


class OjtLog(Base):
    __tablename__ = "ojt_log"

    log_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("ojt_intern.user_id"), nullable=False)
    log_key = Column(String(40), nullable=False)
    date = Column(String(10), nullable=False)  # YYYY/MM/DD
    clock_in = Column(String(8), nullable=False)  # HH:MM AM
    clock_out = Column(String(8), nullable=False)
    hours = Column(Integer, nullable=False)
    revision = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    intern = relationship("Intern", back_populates="time_logs")

    __table_args__ = (
        UniqueConstraint("user_id", "log_key", name="uq_ojt_log_user_key"),
    )
