from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from app.database import Base


class User(Base):
    __tablename__ = "users"

    username = Column(String(100), primary_key=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone = Column(String(32), nullable=False)

    # Relationships
    messages_sent = relationship("Message", foreign_keys="Message.from_username", back_populates="from_user")
    messages_received = relationship("Message", foreign_keys="Message.to_username", back_populates="to_user")
