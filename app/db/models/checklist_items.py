from typing import TYPE_CHECKING, Optional
from sqlmodel import Field, Relationship
from sqlalchemy import Column, ForeignKey, Integer

from .base import BaseModelDB

if TYPE_CHECKING:
    from .todos import Todo


class TodoChecklistItem(BaseModelDB, table=True):
    """
    Sous-tâche d'un todo.
    order_index : ordre d'affichage dense, à partir de 0, unique par todo.
    """

    text: str
    completed: bool = Field(default=False)
    order_index: int = Field(default=0, ge=0)

    todo_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("todo.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Todo parent",
    )

    todo: Optional["Todo"] = Relationship(back_populates="checklist_items")
