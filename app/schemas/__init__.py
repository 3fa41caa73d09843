from app.schemas.message import (
    MessageCreate, MessageCreated, MessageReadReceipt, MessageUser, MessageDetail
)

__all__ = [
    "MessageCreate", "MessageCreated", "MessageReadReceipt", "MessageUser", "MessageDetail"
]
