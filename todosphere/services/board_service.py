"""Board service"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from todosphere.core.errors import ValidationError
from todosphere.models.user import User
from todosphere.models.board import Board
from todosphere.models.todo import Todo
from todosphere.models.comment import Comment
from todosphere.services.ownership import ensure_owner

logger = logging.getLogger(__name__)


def _clean_title(title: Optional[str]) -> str:
    title = (title or "").strip()
    if not title:
        raise ValidationError("Please provide a title")
    return title


def get_owned_board(db: Session, board_id: int, requester: User) -> Board:
    board = db.query(Board).filter(Board.id == board_id).first()
    return ensure_owner(board, requester.id, "Board")


def list_boards(db: Session, requester: User) -> List[Board]:
    return db.query(Board).filter(
        Board.user_id == requester.id
    ).order_by(Board.created_at.desc(), Board.id.desc()).all()


def create_board(db: Session, title: Optional[str], requester: User) -> Board:
    board = Board(title=_clean_title(title), user_id=requester.id)
    db.add(board)
    db.commit()
    db.refresh(board)
    logger.info(f"Board created: {board.id} by user {requester.id}")
    return board


def update_board(db: Session, board_id: int, title: Optional[str], requester: User) -> Board:
    board = get_owned_board(db, board_id, requester)
    board.title = _clean_title(title)
    db.commit()
    db.refresh(board)
    return board


def delete_board(db: Session, board_id: int, requester: User) -> dict:
    """Supprime le board et tout son contenu.

    Ordre: commentaires des todos, todos, puis le board lui-même.
    """
    board = get_owned_board(db, board_id, requester)

    todo_ids = [row.id for row in db.query(Todo.id).filter(Todo.board_id == board.id).all()]
    if todo_ids:
        db.query(Comment).filter(Comment.todo_id.in_(todo_ids)).delete(synchronize_session=False)
    db.query(Todo).filter(Todo.board_id == board.id).delete(synchronize_session=False)
    db.delete(board)
    db.commit()

    logger.info(f"Board deleted: {board_id} ({len(todo_ids)} todos) by user {requester.id}")
    return {"message": "Board deleted successfully"}
