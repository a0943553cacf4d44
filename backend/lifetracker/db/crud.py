import uuid
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlmodel import Session, select

from ..utils.normalize import normalize_list_name
from .models import Task, TaskList, utcnow

INBOX = "inbox"

def get_list_by_name(session: Session, name: str) -> Optional[TaskList]:
    return session.exec(select(TaskList).where(TaskList.name == normalize_list_name(name))).first()

def get_inbox(session: Session) -> Optional[TaskList]:
    return get_list_by_name(session, INBOX)

def get_list(session: Session, list_id: uuid.UUID) -> Optional[TaskList]:
    return session.get(TaskList, list_id)

def list_lists(session: Session) -> List[Tuple[TaskList, int]]:
    stmt = (
        select(TaskList, func.count(Task.id))
        .outerjoin(Task, Task.list_id == TaskList.id)
        .group_by(TaskList.id)
        .order_by(TaskList.position, TaskList.created_at)
    )
    return [(lst, count) for lst, count in session.exec(stmt).all()]

def create_task(session: Session, task: Task) -> Task:
    session.add(task)
    session.commit()
    session.refresh(task)
    return task

def get_task(session: Session, task_id: uuid.UUID) -> Optional[Task]:
    return session.get(Task, task_id)

def list_tasks(session: Session, list_id: Optional[uuid.UUID] = None, limit: Optional[int] = None) -> List[Task]:
    stmt = select(Task)
    if list_id is not None:
        stmt = stmt.where(Task.list_id == list_id)
    stmt = stmt.order_by(Task.created_at.desc())
    if limit is not None:
        stmt = stmt.limit(limit)
    return session.exec(stmt).all()

def update_task(session: Session, task: Task, changes: Dict[str, Any]) -> Task:
    """Apply only the fields present in ``changes``; None clears a nullable field."""
    for key, value in changes.items():
        if key == "completed":
            _set_completed(task, value)
        else:
            setattr(task, key, value)
    return _save(session, task)

def toggle_complete(session: Session, task: Task) -> Task:
    _set_completed(task, not task.completed)
    return _save(session, task)

def delete_task(session: Session, task: Task) -> None:
    session.delete(task)
    session.commit()

def _set_completed(task: Task, completed: bool) -> None:
    task.completed = completed
    task.completed_at = utcnow() if completed else None

def _save(session: Session, task: Task) -> Task:
    task.updated_at = utcnow()
    session.add(task)
    session.commit()
    session.refresh(task)
    return task
