from typing import List
from fastapi import Depends, Path, Response, status
from taskapi.routers.deps import AuthenticatedUser, get_current_user
from taskapi.schemas.task import TaskRequest, TaskResponse

# SQLite and most SQL backends store ids as signed 64-bit integers
MAX_TASK_ID = 2**63 - 1


class TaskController:
    def __init__(self, task_usecase):
        self.task_usecase = task_usecase

    def get_all_tasks(self, current_user: AuthenticatedUser = Depends(get_current_user)) -> List[TaskResponse]:
        return self.task_usecase.get_all_tasks(current_user.user_id)

    def get_task_by_id(
        self,
        task_id: int = Path(ge=1, le=MAX_TASK_ID),
        current_user: AuthenticatedUser = Depends(get_current_user),
    ) -> TaskResponse:
        return self.task_usecase.get_task_by_id(current_user.user_id, task_id)

    def create_task(
        self,
        task: TaskRequest,
        current_user: AuthenticatedUser = Depends(get_current_user),
    ) -> TaskResponse:
        return self.task_usecase.create_task(task, current_user.user_id)

    def update_task(
        self,
        task: TaskRequest,
        task_id: int = Path(ge=1, le=MAX_TASK_ID),
        current_user: AuthenticatedUser = Depends(get_current_user),
    ) -> TaskResponse:
        return self.task_usecase.update_task(task, current_user.user_id, task_id)

    def delete_task(
        self,
        task_id: int = Path(ge=1, le=MAX_TASK_ID),
        current_user: AuthenticatedUser = Depends(get_current_user),
    ) -> Response:
        self.task_usecase.delete_task(current_user.user_id, task_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
