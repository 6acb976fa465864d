from __future__ import annotations

import logging
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from task_tracker.domain.task_models import utc_now

logger = logging.getLogger("tracker.audit")


class AuditEntry(BaseModel):
    action: str
    user_id: int
    subject: str
    at: datetime = Field(default_factory=utc_now)


class InMemoryAuditLog:
    def __init__(self):
        self.entries: List[AuditEntry] = []

    def log(self, action: str, user_id: int, subject: str) -> None:
        entry = AuditEntry(action=action, user_id=user_id, subject=subject)
        self.entries.append(entry)
        logger.info(
            "audit.record",
            extra={
                "category": "audit",
                "event": "audit.record",
                "action": action,
                "user_id": user_id,
                "subject": subject,
            },
        )

    def entries_for(self, user_id: int) -> List[AuditEntry]:
        return [e for e in self.entries if e.user_id == user_id]
