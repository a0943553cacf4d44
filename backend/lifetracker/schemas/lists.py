import uuid
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, computed_field

from ..utils.normalize import display_list_name
from .tasks import TaskOut

class ListOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    is_system: bool
    is_deletable: bool
    position: int
    created_at: datetime

    @computed_field
    @property
    def display_name(self) -> str:
        return display_list_name(self.name)

class ListWithCount(ListOut):
    task_count: int = 0

class ListDetail(ListOut):
    tasks: List[TaskOut] = []

class ListsResponse(BaseModel):
    lists: List[ListWithCount]

class ListResponse(BaseModel):
    list: ListDetail
