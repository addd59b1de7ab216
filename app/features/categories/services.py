"""
➡️ But : Contenir la logique métier des catégories.

Toutes les opérations sont bornées au propriétaire : une catégorie d'un autre
utilisateur est indiscernable d'une catégorie inexistante (NotFoundError).
"""

from typing import Sequence

from app.core.errors import NotFoundError, ValidationError
from app.core.schemas import blank_to_none
from app.db.models.categories import Category, DEFAULT_CATEGORY_COLOR
from app.db.repositories.categories import CategoryRepository
from app.features.categories.schemas import CategoryCreateIn, CategoryUpdateIn


class CategoryService:
    def __init__(self, repo: CategoryRepository):
        self.repo = repo

    def _get_owned_or_404(self, category_id: int, user_id: int) -> Category:
        category = self.repo.get_owned(category_id, user_id)
        if not category:
            raise NotFoundError("Category not found")
        return category

    def list(self, user_id: int) -> Sequence[Category]:
        return self.repo.list_for_user(user_id)

    def create(self, payload: CategoryCreateIn, *, user_id: int) -> Category:
        name = blank_to_none(payload.name)
        if not name:
            raise ValidationError("Name is required")
        return self.repo.create(
            name=name,
            color=payload.color or DEFAULT_CATEGORY_COLOR,
            user_id=user_id,
        )

    def update(self, category_id: int, payload: CategoryUpdateIn, *, user_id: int) -> Category:
        category = self._get_owned_or_404(category_id, user_id)

        changes = payload.model_dump(exclude_unset=True)
        if "name" in changes:
            changes["name"] = blank_to_none(changes["name"])
            if not changes["name"]:
                raise ValidationError("Name cannot be empty")
        if "color" in changes and not changes["color"]:
            changes["color"] = DEFAULT_CATEGORY_COLOR

        return self.repo.update(category, **changes)

    def delete(self, category_id: int, *, user_id: int) -> None:
        # les todos liés sont détachés par la FK (ON DELETE SET NULL)
        category = self._get_owned_or_404(category_id, user_id)
        self.repo.delete(category)
