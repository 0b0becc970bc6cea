"""Board model"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from datetime import datetime
from todosphere.core.database import Base


class Board(Base):
    __tablename__ = "boards"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    title = Column(String, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
