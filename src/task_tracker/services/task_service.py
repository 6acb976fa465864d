import logging
from datetime import datetime
from typing import Callable, List, Optional, Union

from task_tracker.domain.errors import InactiveUserError, TaskValidationError
from task_tracker.domain.ports import AuditLog, Notifier, TaskStore, UserDirectory
from task_tracker.domain.task_models import Task, TaskPriority, TaskStatus, as_utc, parse_priority, utc_now

logger = logging.getLogger("tracker.tasks")


class TaskService:
    """
    Task lifecycle rules for a single user at a time.

    All task state lives in the injected store; the service only owns the
    id counter. Not thread-safe: callers sharing one instance across threads
    must serialize access themselves.
    """

    def __init__(
        self,
        repo: TaskStore,
        users: UserDirectory,
        notifier: Notifier,
        audit: AuditLog,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.repo = repo
        self.users = users
        self.notifier = notifier
        self.audit = audit
        self.clock = clock
        self._next_id = 1

    def create_task(
        self,
        user_id: int,
        title: str,
        priority: Union[str, TaskPriority],
        deadline: Optional[datetime] = None,
    ) -> Task:
        if not self.users.is_active(user_id):
            self._rejected("task.create", user_id, reason="inactive_user")
            raise InactiveUserError(user_id)

        if not title or not title.strip():
            self._rejected("task.create", user_id, reason="title_required")
            raise TaskValidationError("title required", field="title")

        now = self.clock()
        if deadline is not None and as_utc(deadline) < as_utc(now):
            self._rejected("task.create", user_id, reason="deadline_in_past")
            raise TaskValidationError("deadline in the past", field="deadline")

        parsed = parse_priority(priority)
        if parsed is None:
            self._rejected("task.create", user_id, reason="invalid_priority")
            raise TaskValidationError("invalid priority", field="priority")

        task = Task(
            id=self._next_id,
            user_id=user_id,
            title=title,
            priority=parsed,
            created=now,
            deadline=deadline,
        )
        self._next_id += 1

        self.repo.save(task)
        self.notifier.notify_created(user_id, title)
        self.audit.log("CREATE", user_id, title)

        logger.info(
            "task.create",
            extra={"category": "tasks", "event": "task.create", "task_id": task.id, "user_id": user_id, "title": title},
        )
        return task

    def complete_task(self, user_id: int, task_id: int) -> bool:
        task = self._owned_task(user_id, task_id, "task.complete")
        if task is None:
            return False

        if task.is_completed:
            self._rejected("task.complete", user_id, reason="already_completed", task_id=task_id)
            return False

        task.status = TaskStatus.done
        self.repo.save(task)
        self.notifier.notify_completed(user_id, task.title)
        self.audit.log("COMPLETE", user_id, task.title)

        logger.info(
            "task.complete",
            extra={"category": "tasks", "event": "task.complete", "task_id": task_id, "user_id": user_id},
        )
        return True

    def delete_task(self, user_id: int, task_id: int) -> bool:
        task = self._owned_task(user_id, task_id, "task.delete")
        if task is None:
            return False

        title = task.title
        self.repo.delete(task_id)
        self.audit.log("DELETE", user_id, title)

        logger.info(
            "task.delete",
            extra={"category": "tasks", "event": "task.delete", "task_id": task_id, "user_id": user_id},
        )
        return True

    def get_active_tasks(self, user_id: int) -> List[Task]:
        return [t for t in self.repo.list_for_user(user_id) if not t.is_completed]

    def get_overdue_tasks(self, user_id: int) -> List[Task]:
        now = self.clock()
        return [t for t in self.repo.list_for_user(user_id) if t.is_overdue(now)]

    def update_priority(self, user_id: int, task_id: int, new_priority: Union[str, TaskPriority]) -> bool:
        task = self._owned_task(user_id, task_id, "task.update_priority")
        if task is None:
            return False

        parsed = parse_priority(new_priority)
        if parsed is None:
            self._rejected("task.update_priority", user_id, reason="invalid_priority", task_id=task_id)
            return False

        task.priority = parsed
        self.repo.save(task)
        # Subject is the new priority, not the title.
        self.audit.log("UPDATE_PRIORITY", user_id, parsed.value)

        logger.info(
            "task.update_priority",
            extra={
                "category": "tasks",
                "event": "task.update_priority",
                "task_id": task_id,
                "user_id": user_id,
                "priority": parsed.value,
            },
        )
        return True

    def _owned_task(self, user_id: int, task_id: int, event: str) -> Optional[Task]:
        # Missing and foreign tasks look the same to the caller.
        task = self.repo.find(task_id)
        if task is None or task.user_id != user_id:
            self._rejected(event, user_id, reason="not_found", task_id=task_id)
            return None
        return task

    @staticmethod
    def _rejected(event: str, user_id: int, reason: str, task_id: Optional[int] = None) -> None:
        logger.info(
            f"{event}.rejected",
            extra={
                "category": "tasks",
                "event": f"{event}.rejected",
                "user_id": user_id,
                "task_id": task_id,
                "reason": reason,
            },
        )
