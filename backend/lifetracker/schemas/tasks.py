import uuid
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..db.models import Priority

def _assume_utc(v: Optional[datetime]) -> Optional[datetime]:
    if v is not None and v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v

class ListSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str

class TaskIn(BaseModel):
    title: str = Field(min_length=1, max_length=500)
    notes: Optional[str] = Field(default=None, max_length=5000)
    list_id: Optional[uuid.UUID] = None  # defaults to Inbox
    priority: Optional[Priority] = None
    due_date: Optional[datetime] = None
    raw_input: Optional[str] = None
    parse_warning: bool = False
    parse_errors: Optional[str] = None

    @field_validator("due_date")
    @classmethod
    def due_date_utc(cls, v):
        return _assume_utc(v)

class TaskUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=500)
    notes: Optional[str] = Field(default=None, max_length=5000)
    list_id: Optional[uuid.UUID] = None
    priority: Optional[Priority] = None
    due_date: Optional[datetime] = None
    completed: Optional[bool] = None

    @field_validator("title", "list_id", "completed")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v

    @field_validator("due_date")
    @classmethod
    def due_date_utc(cls, v):
        return _assume_utc(v)

class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    notes: Optional[str]
    list_id: uuid.UUID
    priority: Optional[Priority]
    due_date: Optional[datetime]
    completed: bool
    completed_at: Optional[datetime]
    raw_input: Optional[str]
    parse_warning: bool
    parse_errors: Optional[str]
    created_at: datetime
    updated_at: datetime
    list: Optional[ListSummary] = None

class TaskResponse(BaseModel):
    task: TaskOut

class TaskListResponse(BaseModel):
    tasks: List[TaskOut]
