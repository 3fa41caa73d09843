import logging
from typing import Any, Mapping, Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from app.errors import NotFoundError
from app.models.message import Message
from app.models.user import User
from app.schemas.message import MessageCreated, MessageDetail, MessageReadReceipt, MessageUser
from app.services.notifications import (
    LoggingNotificationRecorder,
    NotificationOutcome,
    NotificationRecorder,
    NotificationStatus,
    SmsSender,
    new_message_text,
)

logger = logging.getLogger(__name__)


def to_message_detail(row: Mapping[str, Any]) -> MessageDetail:
    """Reshape a flat message/sender/recipient row into nested user objects."""
    return MessageDetail(
        id=row["id"],
        from_user=MessageUser(
            username=row["from_username"],
            first_name=row["from_first_name"],
            last_name=row["from_last_name"],
            phone=row["from_phone"],
        ),
        to_user=MessageUser(
            username=row["to_username"],
            first_name=row["to_first_name"],
            last_name=row["to_last_name"],
            phone=row["to_phone"],
        ),
        body=row["body"],
        sent_at=row["sent_at"],
        read_at=row["read_at"],
    )


class MessageRepository:
    """Data access for messages between users.

    Creating a message also sends the recipient a best-effort SMS. The outcome
    of that attempt is handed to ``recorder`` and never raised to the caller.
    """

    def __init__(
        self,
        db: AsyncSession,
        sms_sender: SmsSender,
        recorder: Optional[NotificationRecorder] = None,
    ):
        self.db = db
        self.sms_sender = sms_sender
        self.recorder = recorder or LoggingNotificationRecorder()

    async def create(self, from_username: str, to_username: str, body: str) -> MessageCreated:
        """Insert a message; returns {id, from_username, to_username, body, sent_at}."""
        stmt = (
            insert(Message)
            .values(
                from_username=from_username,
                to_username=to_username,
                body=body,
                sent_at=func.current_timestamp(),
            )
            .returning(Message.id, Message.from_username, Message.to_username, Message.body, Message.sent_at)
        )
        result = await self.db.execute(stmt)
        message = MessageCreated(**result.one()._mapping)
        await self.db.commit()
        logger.info(f"Message {message.id} created from {from_username} to {to_username}")

        await self._notify_recipient(message)
        return message

    async def _notify_recipient(self, message: MessageCreated) -> NotificationOutcome:
        # Store errors here propagate; only the send itself is suppressed
        stmt = select(User.phone).where(User.username == message.to_username)
        result = await self.db.execute(stmt)
        phone = result.scalar_one_or_none()

        outcome = NotificationOutcome(
            message_id=message.id,
            status=NotificationStatus.SKIPPED,
            to_username=message.to_username,
            to_phone=phone,
        )
        if phone is None:
            outcome.detail = "recipient not found"
        elif not self.sms_sender.is_configured():
            outcome.detail = "SMS is not configured"
        else:
            try:
                outcome.sid = await self.sms_sender.send_sms(phone, new_message_text(message.from_username))
                outcome.status = NotificationStatus.SENT
            except Exception as e:
                outcome.status = NotificationStatus.FAILED
                outcome.detail = str(e) or e.__class__.__name__

        self.recorder.record(outcome)
        return outcome

    async def mark_read(self, message_id: int) -> MessageReadReceipt:
        """Set read_at to now; returns {id, read_at}."""
        stmt = (
            update(Message)
            .where(Message.id == message_id)
            .values(read_at=func.current_timestamp())
            .returning(Message.id, Message.read_at)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        row = result.one_or_none()
        if row is None:
            logger.info(f"mark_read: no such message {message_id}")
            raise NotFoundError(f"No such message: {message_id}")

        await self.db.commit()
        return MessageReadReceipt(**row._mapping)

    async def get(self, message_id: int) -> MessageDetail:
        """Get a message with both participants.

        returns {id, from_user, to_user, body, sent_at, read_at}, where
        from_user and to_user are {username, first_name, last_name, phone}.
        """
        f = aliased(User, name="f")
        t = aliased(User, name="t")
        stmt = (
            select(
                Message.id,
                Message.from_username,
                f.first_name.label("from_first_name"),
                f.last_name.label("from_last_name"),
                f.phone.label("from_phone"),
                Message.to_username,
                t.first_name.label("to_first_name"),
                t.last_name.label("to_last_name"),
                t.phone.label("to_phone"),
                Message.body,
                Message.sent_at,
                Message.read_at,
            )
            .select_from(Message)
            .join(f, Message.from_username == f.username)
            .join(t, Message.to_username == t.username)
            .where(Message.id == message_id)
        )
        result = await self.db.execute(stmt)
        row = result.one_or_none()
        if row is None:
            logger.info(f"get: no such message {message_id}")
            raise NotFoundError(f"No such message: {message_id}")

        return to_message_detail(row._mapping)
