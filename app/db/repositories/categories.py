from typing import Sequence
from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.categories import Category

class CategoryRepository(BaseRepository[Category]):
    model = Category

    def list_for_user(self, user_id: int) -> Sequence[Category]:
        """Catégories d'un utilisateur, plus anciennes d'abord."""
        statement = (
            select(Category)
            .where(Category.user_id == user_id)
            .order_by(Category.created_at.asc(), Category.id.asc())
        )
        return self._all(statement)
