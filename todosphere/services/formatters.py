"""Conversion lignes SQLAlchemy -> schémas de réponse.

Toutes les lectures passent par ici: le JSON exposé garde toujours la même
forme, même pour des lignes anciennes ou incomplètes.
"""

from todosphere.models.board import Board
from todosphere.models.todo import Todo
from todosphere.models.comment import Comment
from todosphere.schemas.board import BoardResponse
from todosphere.schemas.todo import TodoResponse, SubtaskResponse, Recurrence
from todosphere.schemas.comment import CommentResponse

DEFAULT_RECURRENCE = {"enabled": False, "pattern": None, "interval": 1, "end_date": None}


def format_board(board: Board) -> BoardResponse:
    return BoardResponse(
        id=board.id,
        title=board.title,
        user_id=board.user_id,
        created_at=board.created_at
    )


def format_recurrence(stored) -> Recurrence:
    # un objet partiel ({"enabled": True}) est complété avec les valeurs par défaut
    return Recurrence(**{**DEFAULT_RECURRENCE, **(stored or {})})


def format_todo(todo: Todo) -> TodoResponse:
    return TodoResponse(
        id=todo.id,
        title=todo.title,
        description=todo.description or "",
        status=todo.status or "pending",
        priority=todo.priority or "medium",
        due_date=todo.due_date,
        subtasks=[
            SubtaskResponse(id=st["id"], title=st["title"], completed=bool(st.get("completed")))
            for st in (todo.subtasks or [])
        ],
        dependencies=list(todo.dependencies or []),
        recurrence=format_recurrence(todo.recurrence),
        board_id=todo.board_id,
        user_id=todo.user_id,
        created_at=todo.created_at,
        updated_at=todo.updated_at
    )


def format_comment(comment: Comment) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        content=comment.content,
        todo_id=comment.todo_id,
        user_id=comment.user_id,
        user_name=comment.author.name if comment.author else "",
        type=comment.type or "comment",
        created_at=comment.created_at
    )
