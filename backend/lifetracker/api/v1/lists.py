import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from ...db.crud import get_list, list_lists, list_tasks
from ...db.session import get_session
from ...schemas.lists import ListDetail, ListOut, ListResponse, ListsResponse, ListWithCount
from ...schemas.tasks import TaskOut
from ..deps import verify_api_key

router = APIRouter(dependencies=[Depends(verify_api_key)])

@router.get("/lists", response_model=ListsResponse)
def list_all(session: Session = Depends(get_session)):
    lists = []
    for lst, count in list_lists(session):
        out = ListWithCount.model_validate(lst)
        out.task_count = count
        lists.append(out)
    return ListsResponse(lists=lists)

@router.get("/lists/{list_id}", response_model=ListResponse)
def get_one(list_id: uuid.UUID, session: Session = Depends(get_session)):
    lst = get_list(session, list_id)
    if lst is None:
        raise HTTPException(status_code=404, detail=f"List with id {list_id} not found")
    tasks = [TaskOut.model_validate(t) for t in list_tasks(session, list_id=list_id)]
    detail = ListDetail(**ListOut.model_validate(lst).model_dump(exclude={"display_name"}), tasks=tasks)
    return ListResponse(list=detail)
