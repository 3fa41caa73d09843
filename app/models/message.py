from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship
from app.database import Base


class Message(Base):
    """Message sent from one user to another."""
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    body = Column(Text, nullable=False)
    sent_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    read_at = Column(DateTime, nullable=True, default=None)

    # Foreign keys
    from_username = Column(String(100), ForeignKey("users.username"), nullable=False)
    to_username = Column(String(100), ForeignKey("users.username"), nullable=False)

    # Relationships
    from_user = relationship("User", foreign_keys=[from_username], back_populates="messages_sent")
    to_user = relationship("User", foreign_keys=[to_username], back_populates="messages_received")
