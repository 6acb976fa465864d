from __future__ import annotations
from typing import Dict, List, Optional

from task_tracker.domain.task_models import Task

class InMemoryTaskStore:
    """
    Process-local TaskStore.
    Keeps copies, so a task changed by a caller is only visible after save().
    """
    def __init__(self):
        self._tasks: Dict[int, Task] = {}

    def find(self, task_id: int) -> Optional[Task]:
        task = self._tasks.get(task_id)
        return task.model_copy() if task else None

    def list_for_user(self, user_id: int) -> List[Task]:
        # insertion order
        return [t.model_copy() for t in self._tasks.values() if t.user_id == user_id]

    def save(self, task: Task) -> None:
        self._tasks[task.id] = task.model_copy()

    def delete(self, task_id: int) -> None:
        self._tasks.pop(task_id, None)
