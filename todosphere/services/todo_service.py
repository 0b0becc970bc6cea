"""Todo service: CRUD, mise à jour partielle et sous-tâches.

Chaque opération suit le même schéma: valider -> charger -> vérifier la
propriété -> modifier -> commit. Les routers formatent le résultat.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4
from sqlalchemy.orm import Session
from todosphere.core.errors import ValidationError, NotFoundError
from todosphere.models.user import User
from todosphere.models.todo import Todo
from todosphere.models.comment import Comment
from todosphere.schemas.todo import TodoCreate, TodoUpdate, Recurrence
from todosphere.services.board_service import get_owned_board
from todosphere.services.ownership import ensure_owner

logger = logging.getLogger(__name__)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Les dates sont stockées en UTC sans tzinfo."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _recurrence_to_json(recurrence: Recurrence) -> dict:
    data = recurrence.model_dump(mode="json")
    if recurrence.end_date is not None:
        data["end_date"] = to_naive_utc(recurrence.end_date).isoformat()
    return data


def get_owned_todo(db: Session, todo_id: int, requester: User) -> Todo:
    todo = db.query(Todo).filter(Todo.id == todo_id).first()
    return ensure_owner(todo, requester.id, "Todo")


def list_todos(db: Session, board_id: int, requester: User) -> List[Todo]:
    board = get_owned_board(db, board_id, requester)
    return db.query(Todo).filter(
        Todo.board_id == board.id
    ).order_by(Todo.created_at.desc(), Todo.id.desc()).all()


def create_todo(db: Session, data: TodoCreate, requester: User) -> Todo:
    title = (data.title or "").strip()
    if not title or data.board_id is None:
        raise ValidationError("Please provide title and boardId")

    board = get_owned_board(db, data.board_id, requester)

    todo = Todo(
        title=title,
        description=data.description or "",
        priority=data.priority or "medium",
        due_date=to_naive_utc(data.due_date),
        recurrence=_recurrence_to_json(data.recurrence or Recurrence()),
        board_id=board.id,
        user_id=requester.id,
        status="pending",
        subtasks=[],
        dependencies=[]
    )
    db.add(todo)
    db.commit()
    db.refresh(todo)
    logger.info(f"Todo created: {todo.id} in board {board.id} by user {requester.id}")
    return todo


def update_todo(db: Session, todo_id: int, patch: TodoUpdate, requester: User) -> Todo:
    """Applique uniquement les champs autorisés présents dans la requête.

    Un champ absent n'est pas touché; un champ envoyé à null est appliqué
    (utile pour effacer dueDate).
    """
    todo = get_owned_todo(db, todo_id, requester)
    sent = patch.model_fields_set

    if "title" in sent:
        title = (patch.title or "").strip()
        if not title:
            raise ValidationError("Todo title is required")
        todo.title = title
    if "description" in sent:
        todo.description = patch.description or ""
    if "status" in sent and patch.status is not None:
        todo.status = patch.status
    if "priority" in sent and patch.priority is not None:
        todo.priority = patch.priority
    if "due_date" in sent:
        todo.due_date = to_naive_utc(patch.due_date)
    if "recurrence" in sent:
        todo.recurrence = _recurrence_to_json(patch.recurrence or Recurrence())
    if "dependencies" in sent:
        # ensemble d'ids: doublons retirés, ordre conservé; pas de contrôle d'existence ni de cycle
        todo.dependencies = list(dict.fromkeys(patch.dependencies or []))

    db.commit()
    db.refresh(todo)
    return todo


def delete_todo(db: Session, todo_id: int, requester: User) -> dict:
    todo = get_owned_todo(db, todo_id, requester)

    db.query(Comment).filter(Comment.todo_id == todo.id).delete(synchronize_session=False)
    db.delete(todo)
    db.commit()

    logger.info(f"Todo deleted: {todo_id} by user {requester.id}")
    return {"message": "Todo deleted successfully"}


# ============ SOUS-TÂCHES ============
# La colonne JSON n'est pas suivie en place: on réaffecte toujours une nouvelle liste.

def add_subtask(db: Session, todo_id: int, title: Optional[str], requester: User) -> Todo:
    todo = get_owned_todo(db, todo_id, requester)

    title = (title or "").strip()
    if not title:
        raise ValidationError("Subtask title is required")

    subtask = {"id": uuid4().hex, "title": title, "completed": False}
    todo.subtasks = list(todo.subtasks or []) + [subtask]
    db.commit()
    db.refresh(todo)
    return todo


def _find_subtask_index(todo: Todo, subtask_id: str) -> int:
    for index, subtask in enumerate(todo.subtasks or []):
        if subtask["id"] == subtask_id:
            return index
    raise NotFoundError("Subtask not found")


def toggle_subtask(db: Session, todo_id: int, subtask_id: str, requester: User) -> Todo:
    todo = get_owned_todo(db, todo_id, requester)
    index = _find_subtask_index(todo, subtask_id)

    subtasks = [dict(st) for st in todo.subtasks]
    subtasks[index]["completed"] = not subtasks[index].get("completed", False)
    todo.subtasks = subtasks
    db.commit()
    db.refresh(todo)
    return todo


def delete_subtask(db: Session, todo_id: int, subtask_id: str, requester: User) -> Todo:
    todo = get_owned_todo(db, todo_id, requester)
    index = _find_subtask_index(todo, subtask_id)

    subtasks = list(todo.subtasks)
    del subtasks[index]
    todo.subtasks = subtasks
    db.commit()
    db.refresh(todo)
    return todo
