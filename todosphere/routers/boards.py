import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from todosphere.core.database import get_db
from todosphere.models.user import User
from todosphere.routers.auth import get_current_user
from todosphere.schemas.board import BoardCreate, BoardUpdate, BoardResponse
from todosphere.schemas.common import MessageResponse
from todosphere.services import board_service
from todosphere.services.formatters import format_board

router = APIRouter(prefix="/boards", tags=["boards"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[BoardResponse])
def list_boards(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    logger.debug(f"User {current_user.id} listing boards")
    return [format_board(b) for b in board_service.list_boards(db, current_user)]


@router.get("/{board_id}", response_model=BoardResponse)
def get_board(board_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return format_board(board_service.get_owned_board(db, board_id, current_user))


@router.post("", response_model=BoardResponse, status_code=status.HTTP_201_CREATED)
def create_board(board_data: BoardCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return format_board(board_service.create_board(db, board_data.title, current_user))


@router.put("/{board_id}", response_model=BoardResponse)
def update_board(board_id: int, board_data: BoardUpdate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    # seul le titre est modifiable
    return format_board(board_service.update_board(db, board_id, board_data.title, current_user))


@router.delete("/{board_id}", response_model=MessageResponse)
def delete_board(board_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    logger.debug(f"User {current_user.id} deleting board {board_id}")
    return board_service.delete_board(db, board_id, current_user)
