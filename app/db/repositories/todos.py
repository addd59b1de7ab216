from typing import Optional, Sequence
from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.todos import Todo

class TodoRepository(BaseRepository[Todo]):
    """CRUD Todos + listes filtrées par propriétaire."""
    model = Todo

    def list_for_user(
        self,
        user_id: int,
        *,
        include_completed: bool = False,
        category_id: Optional[int] = None,
    ) -> Sequence[Todo]:
        """
        Todos d'un utilisateur, plus récents d'abord.
        - include_completed : False par défaut (uniquement les todos à faire)
        - category_id       : filtre par catégorie
        """
        statement = select(Todo).where(Todo.user_id == user_id)
        if not include_completed:
            statement = statement.where(Todo.completed.is_(False))
        if category_id is not None:
            statement = statement.where(Todo.category_id == category_id)
        statement = statement.order_by(Todo.created_at.desc(), Todo.id.desc())
        return self._all(statement)
