"""
➡️ But : Définir la structure des tables de la base (ORM).

Représente les todos et leurs relations :

- category : catégorie optionnelle (mise à NULL si la catégorie est supprimée)
- checklist_items : sous-tâches, triées par order_index, supprimées avec le todo

Invariant : completed_at est renseigné si et seulement si completed est vrai.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional
from sqlmodel import Field, Relationship
from sqlalchemy import Column, ForeignKey, Integer

from .base import BaseModelDB, utc_field
from .categories import Category
from .checklist_items import TodoChecklistItem


class Difficulty(str, Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


class Todo(BaseModelDB, table=True):
    title: str = Field(index=True)
    notes: Optional[str] = None
    difficulty: Difficulty = Field(default=Difficulty.MEDIUM)
    due_date: Optional[datetime] = utc_field(default=None)

    completed: bool = Field(default=False, index=True)
    completed_at: Optional[datetime] = utc_field(default=None)

    # FK optionnelle : la suppression d'une catégorie détache ses todos
    category_id: Optional[int] = Field(
        default=None,
        sa_column=Column(
            Integer,
            ForeignKey("category.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
    )
    user_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("user.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Propriétaire",
    )

    # Relations ORM
    category: Optional[Category] = Relationship()
    checklist_items: List[TodoChecklistItem] = Relationship(
        back_populates="todo",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "order_by": "TodoChecklistItem.order_index",
        },
    )
