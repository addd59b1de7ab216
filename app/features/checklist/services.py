from app.core.errors import NotFoundError, ValidationError
from app.core.schemas import blank_to_none
from app.db.models.checklist_items import TodoChecklistItem
from app.db.repositories.checklist_items import ChecklistItemRepository
from app.db.repositories.todos import TodoRepository
from app.features.checklist.schemas import ChecklistItemCreateIn, ChecklistItemUpdateIn


class ChecklistService:
    """
    Sous-tâches d'un todo. La propriété se résout toujours via le todo parent :
    ChecklistItem → Todo → User.
    """

    def __init__(self, repo: ChecklistItemRepository, todo_repo: TodoRepository):
        self.repo = repo
        self.todos = todo_repo

    def _get_owned_or_404(self, item_id: int, user_id: int) -> TodoChecklistItem:
        item = self.repo.get_owned(item_id, user_id)
        if not item:
            raise NotFoundError("Checklist item not found")
        return item

    def add(self, todo_id: int, payload: ChecklistItemCreateIn, *, user_id: int) -> TodoChecklistItem:
        text = blank_to_none(payload.text)
        if not text:
            raise ValidationError("Text is required")

        todo = self.todos.get_owned(todo_id, user_id)
        if not todo:
            raise NotFoundError("Todo not found")

        return self.repo.create(
            text=text,
            todo_id=todo.id,
            order_index=self.repo.next_order_index(todo.id),
        )

    def update(self, item_id: int, payload: ChecklistItemUpdateIn, *, user_id: int) -> TodoChecklistItem:
        item = self._get_owned_or_404(item_id, user_id)

        changes = payload.model_dump(exclude_unset=True)
        if "text" in changes:
            changes["text"] = blank_to_none(changes["text"])
            if not changes["text"]:
                raise ValidationError("Text cannot be empty")
        if "completed" in changes and changes["completed"] is None:
            raise ValidationError("completed cannot be null")

        return self.repo.update(item, **changes)

    def toggle(self, item_id: int, *, user_id: int) -> TodoChecklistItem:
        item = self._get_owned_or_404(item_id, user_id)
        return self.repo.update(item, completed=not item.completed)

    def delete(self, item_id: int, *, user_id: int) -> None:
        item = self._get_owned_or_404(item_id, user_id)
        self.repo.delete(item)
