import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from sqlalchemy import DateTime
from sqlmodel import Field, Relationship, SQLModel

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

def _timestamp(**kwargs):
    return Field(sa_type=DateTime(timezone=True), **kwargs)

class Priority(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

class TaskList(SQLModel, table=True):
    __tablename__ = "list"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(index=True, unique=True)
    is_system: bool = False
    is_deletable: bool = True
    position: int = 0
    created_at: datetime = _timestamp(default_factory=utcnow, nullable=False)

    tasks: List["Task"] = Relationship(back_populates="list")

class Task(SQLModel, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    title: str
    notes: Optional[str] = None
    list_id: uuid.UUID = Field(foreign_key="list.id", index=True)
    priority: Optional[Priority] = None
    due_date: Optional[datetime] = _timestamp(default=None)
    completed: bool = False
    completed_at: Optional[datetime] = _timestamp(default=None)
    raw_input: Optional[str] = None
    parse_warning: bool = False
    parse_errors: Optional[str] = None
    created_at: datetime = _timestamp(default_factory=utcnow, nullable=False)
    updated_at: datetime = _timestamp(default_factory=utcnow, nullable=False)

    list: Optional[TaskList] = Relationship(back_populates="tasks")
