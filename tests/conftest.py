from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

import pytest

from task_tracker.domain.task_models import Task
from task_tracker.services.task_service import TaskService

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class FakeUsers:
    def __init__(self, *active: int) -> None:
        self.active = set(active)

    def is_active(self, user_id: int) -> bool:
        return user_id in self.active


class RecordingStore:
    """
    Dict-backed TaskStore that remembers every save/delete.

    `seed()` puts tasks in without counting as a save.
    """

    def __init__(self) -> None:
        self.tasks: Dict[int, Task] = {}
        self.saved: List[Task] = []
        self.deleted: List[int] = []

    def seed(self, *tasks: Task) -> None:
        for t in tasks:
            self.tasks[t.id] = t.model_copy()

    def find(self, task_id: int) -> Optional[Task]:
        task = self.tasks.get(task_id)
        return task.model_copy() if task else None

    def list_for_user(self, user_id: int) -> List[Task]:
        return [t.model_copy() for t in self.tasks.values() if t.user_id == user_id]

    def save(self, task: Task) -> None:
        self.saved.append(task.model_copy())
        self.tasks[task.id] = task.model_copy()

    def delete(self, task_id: int) -> None:
        self.deleted.append(task_id)
        self.tasks.pop(task_id, None)


class RecordingNotifier:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, int, str]] = []

    def notify_created(self, user_id: int, title: str) -> None:
        self.calls.append(("created", user_id, title))

    def notify_completed(self, user_id: int, title: str) -> None:
        self.calls.append(("completed", user_id, title))


class RecordingAudit:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, int, str]] = []

    def log(self, action: str, user_id: int, subject: str) -> None:
        self.calls.append((action, user_id, subject))


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def users() -> FakeUsers:
    return FakeUsers(1, 2)


@pytest.fixture()
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def audit() -> RecordingAudit:
    return RecordingAudit()


@pytest.fixture()
def service(store, users, notifier, audit, clock) -> TaskService:
    return TaskService(store, users, notifier, audit, clock=clock)
