import logging
from typing import List
from taskapi.errors import ObjectDoesNotExistError, RecordNotFoundError
from taskapi.models.task import Task, utcnow

logger = logging.getLogger(__name__)


class TaskRepository:
    """Owner-scoped persistence for tasks.

    Every read and write filters on ``(id, user_id)`` together, so a task that
    belongs to someone else is indistinguishable from one that does not exist.
    """

    def __init__(self, session_factory):
        self._session_factory = session_factory

    def get_all_tasks(self, user_id: int) -> List[Task]:
        with self._session_factory() as db:
            return (
                db.query(Task)
                .filter(Task.user_id == user_id)
                .order_by(Task.created_at, Task.id)
                .all()
            )

    def get_task_by_id(self, user_id: int, task_id: int) -> Task:
        with self._session_factory() as db:
            task = db.query(Task).filter(Task.id == task_id, Task.user_id == user_id).first()
        if task is None:
            raise RecordNotFoundError()
        return task

    def create_task(self, task: Task) -> Task:
        now = utcnow()
        task.created_at = now
        task.updated_at = now
        with self._session_factory() as db:
            db.add(task)
            db.commit()
            db.refresh(task)
        return task

    def update_task(self, title: str, user_id: int, task_id: int) -> Task:
        with self._session_factory() as db:
            matched = (
                db.query(Task)
                .filter(Task.id == task_id, Task.user_id == user_id)
                .update({Task.title: title, Task.updated_at: utcnow()}, synchronize_session=False)
            )
            if matched < 1:
                db.rollback()
                raise ObjectDoesNotExistError()
            db.commit()
            return db.query(Task).filter(Task.id == task_id).one()

    def delete_task(self, user_id: int, task_id: int) -> None:
        with self._session_factory() as db:
            matched = (
                db.query(Task)
                .filter(Task.id == task_id, Task.user_id == user_id)
                .delete(synchronize_session=False)
            )
            if matched < 1:
                db.rollback()
                raise ObjectDoesNotExistError()
            db.commit()
        logger.debug(f"Deleted task {task_id} of user {user_id}")
