from taskapi.errors import ValidationError
from taskapi.schemas.task import TaskRequest

TITLE_MAX_LENGTH = 10


class TaskValidator:
    def validate(self, task: TaskRequest) -> None:
        title = task.title
        if not title:
            raise ValidationError("title is required")
        # len() counts code points, not encoded bytes
        if not 1 <= len(title) <= TITLE_MAX_LENGTH:
            raise ValidationError("limited max 10 char")
