from typing import Optional
from sqlmodel import select, func

from app.db.repositories.base import BaseRepository
from app.db.models.checklist_items import TodoChecklistItem
from app.db.models.todos import Todo

class ChecklistItemRepository(BaseRepository[TodoChecklistItem]):
    model = TodoChecklistItem

    def get_owned(self, id_: int, user_id: int) -> Optional[TodoChecklistItem]:
        """La propriété se résout via le todo parent."""
        statement = (
            select(TodoChecklistItem)
            .join(Todo, Todo.id == TodoChecklistItem.todo_id)
            .where(TodoChecklistItem.id == id_)
            .where(Todo.user_id == user_id)
        )
        return self.session.exec(statement).first()

    def next_order_index(self, todo_id: int) -> int:
        """max(order_index) + 1 pour ce todo, 0 s'il n'a aucun item."""
        current_max = self.session.exec(
            select(func.max(TodoChecklistItem.order_index))
            .where(TodoChecklistItem.todo_id == todo_id)
        ).one()
        return 0 if current_max is None else current_max + 1
