"""Comment service"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from todosphere.core.errors import ValidationError, NotFoundError
from todosphere.models.user import User
from todosphere.models.comment import Comment
from todosphere.services.todo_service import get_owned_todo

logger = logging.getLogger(__name__)


def list_comments(db: Session, todo_id: int, requester: User) -> List[Comment]:
    # autorisation via le propriétaire du todo, pas via l'auteur
    todo = get_owned_todo(db, todo_id, requester)
    return db.query(Comment).filter(
        Comment.todo_id == todo.id
    ).order_by(Comment.created_at.desc(), Comment.id.desc()).all()


def create_comment(db: Session, todo_id: Optional[int], content: Optional[str],
                   requester: User, comment_type: Optional[str] = None) -> Comment:
    content = (content or "").strip()
    if not content or todo_id is None:
        raise ValidationError("Please provide content and todoId")

    todo = get_owned_todo(db, todo_id, requester)

    comment = Comment(
        content=content,
        todo_id=todo.id,
        user_id=requester.id,
        type=comment_type or "comment"
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)
    logger.info(f"Comment created: {comment.id} on todo {todo.id} by user {requester.id}")
    return comment


def delete_comment(db: Session, comment_id: int, requester: User) -> dict:
    """Supprime un commentaire.

    Même règle que la lecture et la création: seul le propriétaire du todo
    parent peut supprimer.
    """
    comment = db.query(Comment).filter(Comment.id == comment_id).first()
    if comment is None:
        raise NotFoundError("Comment not found")

    get_owned_todo(db, comment.todo_id, requester)

    db.delete(comment)
    db.commit()
    logger.info(f"Comment deleted: {comment_id} by user {requester.id}")
    return {"message": "Comment deleted successfully"}
