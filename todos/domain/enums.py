from enum import Enum

from todos.domain.task import Task


class TaskFilter(str, Enum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    def matches(self, task: Task) -> bool:
        """Czy zadanie należy do widoku wybranego filtrem."""
        if self is TaskFilter.ACTIVE:
            return not task.completed
        if self is TaskFilter.COMPLETED:
            return task.completed
        return True

    def __str__(self):
        return self.value
