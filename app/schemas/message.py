from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class MessageCreate(BaseModel):
    from_username: str
    to_username: str
    body: str


class MessageCreated(BaseModel):
    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: datetime

    class Config:
        from_attributes = True


class MessageReadReceipt(BaseModel):
    id: int
    read_at: datetime

    class Config:
        from_attributes = True


class MessageUser(BaseModel):
    """Public profile of a message participant."""
    username: str
    first_name: str
    last_name: str
    phone: str


class MessageDetail(BaseModel):
    id: int
    from_user: MessageUser
    to_user: MessageUser
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None
