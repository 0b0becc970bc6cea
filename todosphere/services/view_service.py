"""Projections d'une liste de todos pour les vues list/kanban/calendar/gantt/grid.

Fonctions pures: elles reçoivent des TodoResponse déjà formatés et ne touchent
pas la base. Les dates sont en UTC naïf, comme en base.
"""

import calendar
import math
from datetime import date, datetime, timedelta
from typing import List, Optional
from todosphere.schemas.todo import TodoResponse

STATUS_ORDER = ["pending", "in-progress", "completed", "on-hold"]
PRIORITY_ORDER = ["low", "medium", "high", "urgent"]

# ordre d'affichage des colonnes, différent de STATUS_ORDER
KANBAN_COLUMNS = [
    ("pending", "Pending"),
    ("in-progress", "In Progress"),
    ("on-hold", "On Hold"),
    ("completed", "Completed"),
]

GRID_SORT_KEYS = ("title", "status", "priority", "due_date")


def _days_between(later: datetime, earlier: datetime) -> int:
    return math.ceil((later - earlier).total_seconds() / 86400)


def subtask_progress(todo: TodoResponse) -> dict:
    total = len(todo.subtasks)
    completed = sum(1 for st in todo.subtasks if st.completed)
    percent = round(completed / total * 100) if total else 0
    return {"completed": completed, "total": total, "percent": percent}


def is_overdue(todo: TodoResponse, now: Optional[datetime] = None) -> bool:
    if todo.due_date is None or todo.status == "completed":
        return False
    return todo.due_date < (now or datetime.utcnow())


def filter_todos(todos: List[TodoResponse], search: Optional[str] = None) -> List[TodoResponse]:
    """Recherche sur le titre, insensible à la casse."""
    if not search:
        return list(todos)
    needle = search.casefold()
    return [t for t in todos if needle in t.title.casefold()]


def board_progress(todos: List[TodoResponse]) -> dict:
    total = len(todos)
    completed = sum(1 for t in todos if t.status == "completed")
    percent = round(completed / total * 100) if total else 0
    return {"completed": completed, "total": total, "percent": percent}


def list_view(todos: List[TodoResponse], now: Optional[datetime] = None) -> List[dict]:
    now = now or datetime.utcnow()
    return [
        {"todo": todo, "overdue": is_overdue(todo, now), "subtaskProgress": subtask_progress(todo)}
        for todo in todos
    ]


def kanban_view(todos: List[TodoResponse]) -> List[dict]:
    return [
        {"status": status, "label": label, "todos": [t for t in todos if t.status == status]}
        for status, label in KANBAN_COLUMNS
    ]


def calendar_view(todos: List[TodoResponse], year: int, month: int) -> dict:
    """Grille d'un mois: un bucket par jour, todos rangés selon leur dueDate."""
    first_day = date(year, month, 1)
    days_in_month = calendar.monthrange(year, month)[1]

    buckets = {}
    for todo in todos:
        if todo.due_date is None:
            continue
        buckets.setdefault(todo.due_date.date(), []).append(todo)

    days = []
    for day in range(1, days_in_month + 1):
        current = date(year, month, day)
        days.append({"day": day, "date": current.isoformat(), "todos": buckets.get(current, [])})

    return {
        "year": year,
        "month": month,
        # dimanche = 0
        "startingWeekday": (first_day.weekday() + 1) % 7,
        "days": days,
    }


def gantt_view(todos: List[TodoResponse], now: Optional[datetime] = None) -> dict:
    """Barres de createdAt à dueDate sur une plage de dates commune."""
    now = now or datetime.utcnow()
    dated = [t for t in todos if t.due_date is not None]

    if not dated:
        start = now - timedelta(days=3)
        end = now + timedelta(days=14)
    else:
        all_dates = [t.due_date for t in dated] + [t.created_at for t in dated]
        start = min(all_dates) - timedelta(days=2)
        end = max(all_dates) + timedelta(days=5)

    total_days = _days_between(end, start) + 1

    bars = []
    for todo in dated:
        start_offset = max(0, _days_between(todo.created_at, start))
        end_offset = _days_between(todo.due_date, start)
        bars.append({
            "todo": todo,
            "startOffset": start_offset,
            "width": max(1, end_offset - start_offset),
        })

    return {
        "startDate": start.date().isoformat(),
        "endDate": end.date().isoformat(),
        "totalDays": total_days,
        "todayOffset": _days_between(now, start),
        "bars": bars,
    }


def _grid_key(sort_by: str):
    if sort_by == "title":
        return lambda t: t.title.casefold()
    if sort_by == "status":
        return lambda t: STATUS_ORDER.index(t.status)
    if sort_by == "priority":
        return lambda t: PRIORITY_ORDER.index(t.priority)
    # sans date -> en fin de liste en ordre croissant
    return lambda t: (t.due_date is None, t.due_date or datetime.min)


def grid_view(todos: List[TodoResponse], sort_by: str = "due_date", direction: str = "asc") -> List[TodoResponse]:
    if sort_by not in GRID_SORT_KEYS:
        raise ValueError(f"Unknown sort key: {sort_by}")
    return sorted(todos, key=_grid_key(sort_by), reverse=(direction == "desc"))
