from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.database import get_db
from app.repositories.messages import MessageRepository
from app.services.notifications import LoggingNotificationRecorder, NotificationRecorder
from app.services.sms import TwilioSmsSender


def get_sms_sender() -> TwilioSmsSender:
    """Twilio sender built from settings"""
    return TwilioSmsSender(get_settings().sms_config())


def get_notification_recorder() -> NotificationRecorder:
    return LoggingNotificationRecorder()


async def get_message_repository(
    db: AsyncSession = Depends(get_db),
    sms_sender: TwilioSmsSender = Depends(get_sms_sender),
    recorder: NotificationRecorder = Depends(get_notification_recorder),
) -> MessageRepository:
    return MessageRepository(db, sms_sender, recorder)
