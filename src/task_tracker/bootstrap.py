import logging
from typing import Optional

from task_tracker.config import Settings
from task_tracker.infra.audit import InMemoryAuditLog
from task_tracker.infra.db.task_repo_memory import InMemoryTaskStore
from task_tracker.infra.notify import LoggingNotifier
from task_tracker.infra.users import StaticUserDirectory
from task_tracker.observability.logging import setup_logging
from task_tracker.services.task_service import TaskService

logger = logging.getLogger("tracker.system")


def build_service(settings: Optional[Settings] = None) -> TaskService:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level, settings.log_dir)

    svc = TaskService(
        repo=InMemoryTaskStore(),
        users=StaticUserDirectory(settings.active_users),
        notifier=LoggingNotifier(),
        audit=InMemoryAuditLog(),
    )
    logger.info(
        "system.start",
        extra={"category": "system", "event": "system.start", "active_users": len(settings.active_users)},
    )
    return svc
