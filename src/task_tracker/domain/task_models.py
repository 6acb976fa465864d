from __future__ import annotations
from pydantic import BaseModel, Field
from enum import Enum
from datetime import datetime, timezone
from typing import Optional, Union

class TaskStatus(str, Enum):
    open = "open"
    done = "done"

class TaskPriority(str, Enum):
    low = "Low"
    medium = "Medium"
    high = "High"

_PRIORITY_VALUES = frozenset(p.value for p in TaskPriority)

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

def as_utc(value: datetime) -> datetime:
    # naive datetimes are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value

def parse_priority(value: Union[str, TaskPriority, None]) -> Optional[TaskPriority]:
    """Exact, case-sensitive match against the priority names. None if no match."""
    if isinstance(value, TaskPriority):
        return value
    if not isinstance(value, str) or value not in _PRIORITY_VALUES:
        return None
    return TaskPriority(value)

class Task(BaseModel):
    id: int = Field(frozen=True)
    user_id: int = Field(frozen=True)
    title: str
    priority: TaskPriority = TaskPriority.medium
    status: TaskStatus = TaskStatus.open
    created: datetime = Field(default_factory=utc_now)
    deadline: Optional[datetime] = None

    @property
    def is_completed(self) -> bool:
        return self.status is TaskStatus.done

    def is_overdue(self, now: datetime) -> bool:
        if self.is_completed or self.deadline is None:
            return False
        return as_utc(self.deadline) < as_utc(now)
