"""Pydantic schemas for todo request/response validation."""

from pydantic import Field
from datetime import datetime
from typing import Optional, List, Literal
from todosphere.schemas.common import CamelModel

Status = Literal["pending", "in-progress", "completed", "on-hold"]
Priority = Literal["low", "medium", "high", "urgent"]
Pattern = Literal["daily", "weekly", "monthly", "custom"]


class Recurrence(CamelModel):
    enabled: bool = False
    pattern: Optional[Pattern] = None  # n'a de sens que si enabled
    interval: int = Field(1, ge=1)
    end_date: Optional[datetime] = None


class TodoCreate(CamelModel):
    title: Optional[str] = None
    board_id: Optional[int] = None
    description: Optional[str] = None
    priority: Optional[Priority] = None
    due_date: Optional[datetime] = None
    recurrence: Optional[Recurrence] = None


class TodoUpdate(CamelModel):
    """Champs modifiables. Tout autre champ envoyé est ignoré."""

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[Status] = None
    priority: Optional[Priority] = None
    due_date: Optional[datetime] = None
    recurrence: Optional[Recurrence] = None
    dependencies: Optional[List[int]] = None


class SubtaskCreate(CamelModel):
    title: Optional[str] = None


class SubtaskResponse(CamelModel):
    id: str
    title: str
    completed: bool


class TodoResponse(CamelModel):
    id: int
    title: str
    description: str
    status: Status
    priority: Priority
    due_date: Optional[datetime]
    subtasks: List[SubtaskResponse]
    dependencies: List[int]
    recurrence: Recurrence
    board_id: int
    user_id: int
    created_at: datetime
    updated_at: datetime
