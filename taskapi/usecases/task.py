from typing import List
from taskapi.models.task import Task
from taskapi.schemas.task import TaskRequest, TaskResponse


class TaskUsecase:
    """Owner-scoped task operations.

    ``user_id`` always comes from the verified session. Payloads are validated
    before any repository call, and responses never carry the owner id.
    """

    def __init__(self, task_repository, task_validator):
        self.task_repository = task_repository
        self.task_validator = task_validator

    def get_all_tasks(self, user_id: int) -> List[TaskResponse]:
        tasks = self.task_repository.get_all_tasks(user_id)
        return [TaskResponse.from_task(t) for t in tasks]

    def get_task_by_id(self, user_id: int, task_id: int) -> TaskResponse:
        task = self.task_repository.get_task_by_id(user_id, task_id)
        return TaskResponse.from_task(task)

    def create_task(self, task: TaskRequest, user_id: int) -> TaskResponse:
        self.task_validator.validate(task)
        created = self.task_repository.create_task(Task(title=task.title, user_id=user_id))
        return TaskResponse.from_task(created)

    def update_task(self, task: TaskRequest, user_id: int, task_id: int) -> TaskResponse:
        self.task_validator.validate(task)
        updated = self.task_repository.update_task(task.title, user_id, task_id)
        return TaskResponse.from_task(updated)

    def delete_task(self, user_id: int, task_id: int) -> None:
        self.task_repository.delete_task(user_id, task_id)
