import enum
import logging
from typing import Optional, Protocol
from pydantic import BaseModel

logger = logging.getLogger(__name__)

NEW_MESSAGE_TEMPLATE = "You've received a message.ly from {from_username}!"


class NotificationStatus(str, enum.Enum):
    SENT = "SENT"
    SKIPPED = "SKIPPED"
    FAILED = "FAILED"


class NotificationOutcome(BaseModel):
    """Result of one new-message SMS attempt."""
    message_id: int
    status: NotificationStatus
    to_username: str
    to_phone: Optional[str] = None
    sid: Optional[str] = None
    detail: Optional[str] = None


class SmsSender(Protocol):
    def is_configured(self) -> bool: ...

    async def send_sms(self, to: str, body: str) -> Optional[str]: ...


class NotificationRecorder(Protocol):
    def record(self, outcome: NotificationOutcome) -> None: ...


class LoggingNotificationRecorder:
    def record(self, outcome: NotificationOutcome) -> None:
        if outcome.status == NotificationStatus.SENT:
            logger.info(f"✅ New message SMS sent for message {outcome.message_id} to {outcome.to_username}")
        elif outcome.status == NotificationStatus.SKIPPED:
            logger.info(f"New message SMS skipped for message {outcome.message_id}: {outcome.detail}")
        else:
            logger.error(f"❌ Failed to send SMS for message {outcome.message_id} to {outcome.to_username}: {outcome.detail}")


def new_message_text(from_username: str) -> str:
    return NEW_MESSAGE_TEMPLATE.format(from_username=from_username)
