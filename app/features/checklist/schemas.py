from typing import Optional
from pydantic import Field

from app.core.schemas import CamelModel, UtcDatetime


class ChecklistSeedIn(CamelModel):
    """Sous-tâche fournie à la création d'un todo."""
    text: Optional[str] = Field(None, examples=["Eggs"])


class ChecklistItemCreateIn(CamelModel):
    text: Optional[str] = Field(None, examples=["Compare prices"])


class ChecklistItemUpdateIn(CamelModel):
    text: Optional[str] = None
    completed: Optional[bool] = None


class ChecklistItemOut(CamelModel):
    id: int
    text: str
    completed: bool
    order_index: int
    todo_id: int
    created_at: UtcDatetime
    updated_at: UtcDatetime
