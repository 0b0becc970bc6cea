from datetime import datetime
from typing import Optional
from todosphere.schemas.common import CamelModel

# Schemas boards


class BoardCreate(CamelModel):
    # Optional: un titre absent doit donner un 400 métier, pas une erreur de schéma
    title: Optional[str] = None


class BoardUpdate(CamelModel):
    title: Optional[str] = None


class BoardResponse(CamelModel):
    id: int
    title: str
    user_id: int
    created_at: datetime
