import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from todosphere.core.database import get_db
from todosphere.models.user import User
from todosphere.routers.auth import get_current_user
from todosphere.schemas.common import MessageResponse
from todosphere.schemas.todo import TodoCreate, TodoUpdate, TodoResponse, SubtaskCreate
from todosphere.services import todo_service
from todosphere.services.formatters import format_todo

router = APIRouter(prefix="/todos", tags=["todos"])
logger = logging.getLogger(__name__)


@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
def create_todo(todo_data: TodoCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return format_todo(todo_service.create_todo(db, todo_data, current_user))


@router.get("/item/{todo_id}", response_model=TodoResponse)
def get_todo(todo_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return format_todo(todo_service.get_owned_todo(db, todo_id, current_user))


@router.put("/item/{todo_id}", response_model=TodoResponse)
def update_todo(todo_id: int, patch: TodoUpdate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    logger.debug(f"User {current_user.id} updating todo {todo_id}: {sorted(patch.model_fields_set)}")
    return format_todo(todo_service.update_todo(db, todo_id, patch, current_user))


@router.delete("/item/{todo_id}", response_model=MessageResponse)
def delete_todo(todo_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return todo_service.delete_todo(db, todo_id, current_user)


# Sous-tâches

@router.post("/item/{todo_id}/subtask", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
def add_subtask(todo_id: int, subtask: SubtaskCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return format_todo(todo_service.add_subtask(db, todo_id, subtask.title, current_user))


@router.put("/item/{todo_id}/subtask/{subtask_id}", response_model=TodoResponse)
def toggle_subtask(todo_id: int, subtask_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return format_todo(todo_service.toggle_subtask(db, todo_id, subtask_id, current_user))


@router.delete("/item/{todo_id}/subtask/{subtask_id}", response_model=TodoResponse)
def delete_subtask(todo_id: int, subtask_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return format_todo(todo_service.delete_subtask(db, todo_id, subtask_id, current_user))


# Déclarée après /item/... pour la lisibilité, les chemins ne se recouvrent pas
@router.get("/{board_id}", response_model=List[TodoResponse])
def list_todos(board_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return [format_todo(t) for t in todo_service.list_todos(db, board_id, current_user)]
