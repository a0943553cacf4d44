import uuid

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session

from ...db.crud import (
    create_task,
    delete_task,
    get_inbox,
    get_list,
    get_task,
    list_tasks,
    toggle_complete,
    update_task,
)
from ...db.models import Task
from ...db.session import get_session
from ...schemas.tasks import TaskIn, TaskListResponse, TaskOut, TaskResponse, TaskUpdate
from ..deps import verify_api_key

router = APIRouter(dependencies=[Depends(verify_api_key)])

def _get_or_404(session: Session, task_id: uuid.UUID) -> Task:
    task = get_task(session, task_id)
    if task is None:
        raise HTTPException(status_code=404, detail=f"Task with id {task_id} not found")
    return task

def _out(task: Task) -> TaskResponse:
    return TaskResponse(task=TaskOut.model_validate(task))

@router.get("/tasks", response_model=TaskListResponse)
def list_all(session: Session = Depends(get_session)):
    return TaskListResponse(tasks=[TaskOut.model_validate(t) for t in list_tasks(session)])

@router.get("/tasks/{task_id}", response_model=TaskResponse)
def get_one(task_id: uuid.UUID, session: Session = Depends(get_session)):
    return _out(_get_or_404(session, task_id))

@router.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create(body: TaskIn, session: Session = Depends(get_session)):
    if body.list_id is None:
        inbox = get_inbox(session)
        if inbox is None:
            raise HTTPException(status_code=500, detail="Inbox list not found. Please run database seed.")
        list_id = inbox.id
    else:
        if get_list(session, body.list_id) is None:
            raise HTTPException(status_code=400, detail=f"List with id {body.list_id} not found")
        list_id = body.list_id

    t = Task(**body.model_dump(exclude={"list_id"}), list_id=list_id)
    return _out(create_task(session, t))

@router.patch("/tasks/{task_id}", response_model=TaskResponse)
def update(task_id: uuid.UUID, body: TaskUpdate, session: Session = Depends(get_session)):
    task = _get_or_404(session, task_id)
    changes = body.model_dump(exclude_unset=True)
    if "list_id" in changes and get_list(session, changes["list_id"]) is None:
        raise HTTPException(status_code=400, detail=f"List with id {changes['list_id']} not found")
    return _out(update_task(session, task, changes))

@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(task_id: uuid.UUID, session: Session = Depends(get_session)):
    delete_task(session, _get_or_404(session, task_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.post("/tasks/{task_id}/complete", response_model=TaskResponse)
def complete(task_id: uuid.UUID, session: Session = Depends(get_session)):
    return _out(toggle_complete(session, _get_or_404(session, task_id)))
