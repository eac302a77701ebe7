"""Intern profile request/response schemas."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class InternBase(BaseModel):
    student_id: str = Field(min_length=1, max_length=30)
    name: str = Field(min_length=1, max_length=100)
    email: Optional[str] = None
    company_name: Optional[str] = None


class InternCreate(InternBase):
    required_hours: Optional[int] = Field(default=None, ge=1)


class InternOut(InternBase):
    user_id: int
    required_hours: int
    total_hours: int
    last_sync_error: Optional[str] = None
    last_sync_error_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
