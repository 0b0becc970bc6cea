from datetime import datetime
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Literal, Optional
from todosphere.core.database import get_db
from todosphere.models.user import User
from todosphere.routers.auth import get_current_user
from todosphere.services import todo_service, view_service
from todosphere.services.formatters import format_todo

router = APIRouter(prefix="/boards", tags=["views"])

ViewType = Literal["list", "kanban", "calendar", "gantt", "grid"]


@router.get("/{board_id}/views/{view}")
def board_view(
    board_id: int,
    view: ViewType,
    year: Optional[int] = Query(None, ge=1, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
    sort_by: Literal["title", "status", "priority", "dueDate"] = Query("dueDate", alias="sortBy"),
    direction: Literal["asc", "desc"] = Query("asc"),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Todos d'un board projetés selon la vue demandée.

    `search` filtre sur le titre avant la projection; `progress` porte sur tout le board.
    """
    all_todos = [format_todo(t) for t in todo_service.list_todos(db, board_id, current_user)]
    todos = view_service.filter_todos(all_todos, search)

    if view == "kanban":
        result = view_service.kanban_view(todos)
    elif view == "calendar":
        today = datetime.utcnow()
        result = view_service.calendar_view(
            todos,
            year if year is not None else today.year,
            month if month is not None else today.month
        )
    elif view == "gantt":
        result = view_service.gantt_view(todos)
    elif view == "grid":
        key = "due_date" if sort_by == "dueDate" else sort_by
        result = view_service.grid_view(todos, key, direction)
    else:
        result = view_service.list_view(todos)

    return {
        "view": view,
        "boardId": board_id,
        "progress": view_service.board_progress(all_todos),
        "data": result
    }
