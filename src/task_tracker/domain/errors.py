from __future__ import annotations

from typing import Optional


class TaskServiceError(Exception):
    """Base class for errors raised by TaskService."""


class InactiveUserError(TaskServiceError, PermissionError):
    def __init__(self, user_id: int) -> None:
        super().__init__("inactive user")
        self.user_id = user_id


class TaskValidationError(TaskServiceError, ValueError):
    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
