from typing import List
from fastapi import APIRouter, Depends, status
from taskapi.routers.deps import get_current_user
from taskapi.schemas.task import TaskResponse


def build_task_router(task_controller) -> APIRouter:
    """Task CRUD. Every route in the group requires a valid session cookie."""
    router = APIRouter(prefix="/tasks", tags=["tasks"], dependencies=[Depends(get_current_user)])
    router.add_api_route("", task_controller.get_all_tasks, methods=["GET"], response_model=List[TaskResponse])
    router.add_api_route("/{task_id}", task_controller.get_task_by_id, methods=["GET"], response_model=TaskResponse)
    router.add_api_route(
        "",
        task_controller.create_task,
        methods=["POST"],
        response_model=TaskResponse,
        status_code=status.HTTP_201_CREATED,
    )
    router.add_api_route("/{task_id}", task_controller.update_task, methods=["PUT"], response_model=TaskResponse)
    router.add_api_route(
        "/{task_id}",
        task_controller.delete_task,
        methods=["DELETE"],
        status_code=status.HTTP_204_NO_CONTENT,
    )
    return router
