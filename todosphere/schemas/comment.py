from datetime import datetime
from typing import Optional, Literal
from todosphere.schemas.common import CamelModel

CommentType = Literal["comment", "activity"]


class CommentCreate(CamelModel):
    todo_id: Optional[int] = None
    content: Optional[str] = None
    type: Optional[CommentType] = None


class CommentResponse(CamelModel):
    id: int
    content: str
    todo_id: int
    user_id: int
    user_name: str  # nom de l'auteur
    type: CommentType
    created_at: datetime
