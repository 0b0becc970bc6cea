from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from todosphere.core.database import get_db
from todosphere.models.user import User
from todosphere.routers.auth import get_current_user
from todosphere.schemas.comment import CommentCreate, CommentResponse
from todosphere.schemas.common import MessageResponse
from todosphere.services import comment_service
from todosphere.services.formatters import format_comment

router = APIRouter(prefix="/comments", tags=["comments"])


@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def create_comment(comment_data: CommentCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    comment = comment_service.create_comment(
        db,
        comment_data.todo_id,
        comment_data.content,
        current_user,
        comment_type=comment_data.type
    )
    return format_comment(comment)


@router.get("/{todo_id}", response_model=List[CommentResponse])
def list_comments(todo_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    # plus récent en premier
    return [format_comment(c) for c in comment_service.list_comments(db, todo_id, current_user)]


@router.delete("/item/{comment_id}", response_model=MessageResponse)
def delete_comment(comment_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return comment_service.delete_comment(db, comment_id, current_user)
