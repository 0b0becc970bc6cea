from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from todosphere.core.database import Base
from todosphere.models.user import User


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    todo_id = Column(Integer, ForeignKey("todos.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)  # auteur
    content = Column(String, nullable=False)
    type = Column(String, default="comment")  # "comment" ou "activity"
    created_at = Column(DateTime, default=datetime.utcnow)

    author = relationship(User, lazy="joined")
