"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

TodoCreateIn → corps de requête POST (avec sous-tâches optionnelles)

TodoUpdateIn → corps PUT, mise à jour partielle (champ absent = inchangé, null = effacé)

TodoOut → réponse de l’API, avec catégorie et checklist imbriquées
"""

from typing import List, Optional
from pydantic import Field

from app.core.schemas import CamelModel, UtcDatetime
from app.db.models.todos import Difficulty
from app.features.categories.schemas import CategoryOut
from app.features.checklist.schemas import ChecklistItemOut, ChecklistSeedIn


class TodoCreateIn(CamelModel):
    title: Optional[str] = Field(None, examples=["Buy milk"])
    notes: Optional[str] = None
    difficulty: Optional[Difficulty] = Field(None, examples=["MEDIUM"])
    due_date: Optional[UtcDatetime] = None
    category_id: Optional[int] = None
    checklist_items: List[ChecklistSeedIn] = Field(default_factory=list)


class TodoUpdateIn(CamelModel):
    title: Optional[str] = None
    notes: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    due_date: Optional[UtcDatetime] = None
    category_id: Optional[int] = None
    completed: Optional[bool] = None


class TodoOut(CamelModel):
    id: int
    title: str
    notes: Optional[str]
    difficulty: Difficulty
    due_date: Optional[UtcDatetime]
    completed: bool
    completed_at: Optional[UtcDatetime]
    category_id: Optional[int]
    user_id: int
    created_at: UtcDatetime
    updated_at: UtcDatetime

    category: Optional[CategoryOut] = None
    checklist_items: List[ChecklistItemOut] = Field(default_factory=list)
