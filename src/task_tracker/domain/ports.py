"""
Collaborators the task service talks to.

TaskService only depends on these Protocols; concrete stores, notifiers and
audit sinks are injected at construction.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from task_tracker.domain.task_models import Task


class UserDirectory(Protocol):
    def is_active(self, user_id: int) -> bool: ...


class TaskStore(Protocol):
    def find(self, task_id: int) -> Optional[Task]: ...
    def list_for_user(self, user_id: int) -> List[Task]: ...

    # upsert by id
    def save(self, task: Task) -> None: ...
    def delete(self, task_id: int) -> None: ...


class Notifier(Protocol):
    def notify_created(self, user_id: int, title: str) -> None: ...
    def notify_completed(self, user_id: int, title: str) -> None: ...


class AuditLog(Protocol):
    def log(self, action: str, user_id: int, subject: str) -> None: ...
