"""Todo model"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON
from datetime import datetime
from todosphere.core.database import Base


class Todo(Base):
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # fixé à la création, jamais modifié ensuite
    board_id = Column(Integer, ForeignKey("boards.id"), nullable=False, index=True)

    title = Column(String, nullable=False)
    description = Column(String, default="")
    status = Column(String, default="pending")
    priority = Column(String, default="medium")
    due_date = Column(DateTime, nullable=True, index=True)

    # listes/objets embarqués: [{id, title, completed}], [todo_id], {enabled, pattern, interval, end_date}
    subtasks = Column(JSON, default=list)
    dependencies = Column(JSON, default=list)
    recurrence = Column(JSON, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
