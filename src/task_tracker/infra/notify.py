import logging

logger = logging.getLogger("tracker.notify")


class LoggingNotifier:
    """Notifier that only writes structured log events."""

    def notify_created(self, user_id: int, title: str) -> None:
        logger.info(
            "notify.created",
            extra={"category": "notify", "event": "notify.created", "user_id": user_id, "title": title},
        )

    def notify_completed(self, user_id: int, title: str) -> None:
        logger.info(
            "notify.completed",
            extra={"category": "notify", "event": "notify.completed", "user_id": user_id, "title": title},
        )
