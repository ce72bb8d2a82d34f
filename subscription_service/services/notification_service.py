import logging

logger = logging.getLogger(__name__)


class LoggingNotifier:
    """
    Notifier that records every message in the application log.
    Used where no delivery channel (email, SMS) is wired in.
    """

    def __init__(self, level: int = logging.INFO):
        self.level = level

    def send_notification(self, message: str, member_id: int) -> None:
        logger.log(self.level, "Notification for member %s: %s", member_id, message)
