from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class TaskRequest(BaseModel):
    # Policy checks live in TaskValidator; only the shape is decoded here
    title: str = ""


class TaskResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_task(cls, task) -> "TaskResponse":
        # owner id is never exposed
        return cls(id=task.id, title=task.title, created_at=task.created_at, updated_at=task.updated_at)
