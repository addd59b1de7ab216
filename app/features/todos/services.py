"""
➡️ But : Contenir la logique métier : orchestrer les repos, appliquer des règles, gérer les erreurs.

TodoService :

vérifie que le todo (et la catégorie liée) appartient bien à l'appelant,

maintient l'invariant completed ⇔ completed_at renseigné,

crée le todo et ses sous-tâches dans une seule transaction.
"""

from typing import Any, Dict, Optional, Sequence
from sqlmodel import Session

from app.core.errors import NotFoundError, ValidationError
from app.core.schemas import blank_to_none
from app.db.models.base import utcnow
from app.db.models.todos import Difficulty, Todo
from app.db.repositories.todos import TodoRepository
from app.db.repositories.categories import CategoryRepository
from app.db.repositories.checklist_items import ChecklistItemRepository
from app.features.todos.schemas import TodoCreateIn, TodoUpdateIn

_NOT_NULLABLE = ("title", "difficulty", "completed")


def completion_changes(todo: Todo, completed: bool) -> Dict[str, Any]:
    """Champs à écrire pour passer `todo` à l'état `completed`."""
    if not completed:
        return {"completed": False, "completed_at": None}
    if todo.completed and todo.completed_at is not None:
        # déjà terminé : on garde la date d'origine
        return {"completed": True}
    return {"completed": True, "completed_at": utcnow()}


class TodoService:
    def __init__(
        self,
        session: Session,
        repo: TodoRepository,
        category_repo: CategoryRepository,
        checklist_repo: ChecklistItemRepository,
    ):
        self.session = session
        self.repo = repo
        self.categories = category_repo
        self.checklist = checklist_repo

    # -----------------------------------
    # Helpers: ownership
    # -----------------------------------
    def _get_owned_or_404(self, todo_id: int, user_id: int) -> Todo:
        todo = self.repo.get_owned(todo_id, user_id)
        if not todo:
            raise NotFoundError("Todo not found")
        return todo

    def _ensure_category_owned(self, category_id: Optional[int], user_id: int) -> None:
        if category_id is None:
            return
        if not self.categories.get_owned(category_id, user_id):
            raise NotFoundError("Category not found")

    # -----------------------------------
    # Read
    # -----------------------------------
    def list(
        self,
        user_id: int,
        *,
        include_completed: bool = False,
        category_id: Optional[int] = None,
    ) -> Sequence[Todo]:
        return self.repo.list_for_user(
            user_id,
            include_completed=include_completed,
            category_id=category_id,
        )

    def get(self, todo_id: int, *, user_id: int) -> Todo:
        return self._get_owned_or_404(todo_id, user_id)

    # -----------------------------------
    # Create (todo + checklist : même transaction)
    # -----------------------------------
    def create(self, payload: TodoCreateIn, *, user_id: int) -> Todo:
        title = blank_to_none(payload.title)
        if not title:
            raise ValidationError("Title is required")
        seeds = [blank_to_none(seed.text) for seed in payload.checklist_items]
        if not all(seeds):
            raise ValidationError("Text is required")
        self._ensure_category_owned(payload.category_id, user_id)

        try:
            todo = self.repo.create(
                commit=False,
                title=title,
                notes=payload.notes,
                difficulty=payload.difficulty or Difficulty.MEDIUM,
                due_date=payload.due_date,
                category_id=payload.category_id,
                user_id=user_id,
            )
            if seeds:
                self.checklist.create_many(
                    (
                        {"text": text, "order_index": index, "todo_id": todo.id}
                        for index, text in enumerate(seeds)
                    ),
                    commit=False,
                )
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        self.session.refresh(todo)
        return todo

    # -----------------------------------
    # Update (partiel)
    # -----------------------------------
    def update(self, todo_id: int, payload: TodoUpdateIn, *, user_id: int) -> Todo:
        todo = self._get_owned_or_404(todo_id, user_id)

        changes = payload.model_dump(exclude_unset=True)
        for field in _NOT_NULLABLE:
            if field in changes and changes[field] is None:
                raise ValidationError(f"{field} cannot be null")

        if "title" in changes:
            changes["title"] = blank_to_none(changes["title"])
            if not changes["title"]:
                raise ValidationError("Title cannot be empty")
        if "category_id" in changes:
            self._ensure_category_owned(changes["category_id"], user_id)
        if "completed" in changes:
            changes.update(completion_changes(todo, changes.pop("completed")))

        return self.repo.update(todo, **changes)

    # -----------------------------------
    # Toggle / Delete
    # -----------------------------------
    def toggle(self, todo_id: int, *, user_id: int) -> Todo:
        todo = self._get_owned_or_404(todo_id, user_id)
        return self.repo.update(todo, **completion_changes(todo, not todo.completed))

    def delete(self, todo_id: int, *, user_id: int) -> None:
        # les sous-tâches suivent (cascade ORM + ON DELETE CASCADE)
        todo = self._get_owned_or_404(todo_id, user_id)
        self.repo.delete(todo)
