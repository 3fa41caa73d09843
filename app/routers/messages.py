from fastapi import APIRouter, Depends, status

from app.dependencies import get_message_repository
from app.repositories.messages import MessageRepository
from app.schemas.message import MessageCreate, MessageCreated, MessageDetail, MessageReadReceipt

router = APIRouter()


@router.post("", response_model=MessageCreated, status_code=status.HTTP_201_CREATED)
async def create_message(body: MessageCreate, repo: MessageRepository = Depends(get_message_repository)):
    """Send a message; the recipient gets an SMS if they have a phone on file."""
    return await repo.create(body.from_username, body.to_username, body.body)


@router.get("/{message_id}", response_model=MessageDetail)
async def get_message(message_id: int, repo: MessageRepository = Depends(get_message_repository)):
    return await repo.get(message_id)


@router.post("/{message_id}/read", response_model=MessageReadReceipt)
async def mark_message_read(message_id: int, repo: MessageRepository = Depends(get_message_repository)):
    return await repo.mark_read(message_id)
