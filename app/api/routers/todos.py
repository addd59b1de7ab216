"""
➡️ But : Définir les endpoints de l’API.

C’est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT, PATCH, DELETE…)

Résout l'utilisateur courant depuis le bearer token

Appelle le service correspondant

Retourne les schémas de sortie (response_model)

🔹 Avantages :

Automatiquement documentée dans Swagger.

Isolation totale du reste du code : les routes ne contiennent ni SQL ni logique métier.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from app.api.dependencies import get_current_user_id, get_todo_service
from app.features.todos.schemas import TodoCreateIn, TodoUpdateIn, TodoOut
from app.features.todos.services import TodoService

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={404: {"description": "Not Found"}},
)

@router.get(
    "",
    summary="Lister les todos",
    description="Todos à faire de l'utilisateur courant, plus récents d'abord, avec catégorie et checklist.",
    response_model=List[TodoOut],
    responses={
        200: {
            "description": "Liste",
            "content": {
                "application/json": {
                    "example": [{"id": 1, "title": "Buy milk", "notes": None, "difficulty": "MEDIUM",
                                 "dueDate": None, "completed": False, "completedAt": None,
                                 "categoryId": None, "userId": 1, "category": None, "checklistItems": [],
                                 "createdAt": "2025-01-01T10:00:00", "updatedAt": "2025-01-01T10:00:00"}]
                }
            },
        }
    },
)
def list_todos(
    include_completed: bool = Query(False, alias="includeCompleted"),
    category_id: Optional[int] = Query(None, alias="categoryId"),
    user_id: int = Depends(get_current_user_id),
    svc: TodoService = Depends(get_todo_service),
):
    todos = svc.list(user_id, include_completed=include_completed, category_id=category_id)
    return [TodoOut.model_validate(t) for t in todos]

@router.post(
    "",
    summary="Créer un todo",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoOut,
)
def create_todo(
    payload: TodoCreateIn,
    user_id: int = Depends(get_current_user_id),
    svc: TodoService = Depends(get_todo_service),
):
    return TodoOut.model_validate(svc.create(payload, user_id=user_id))

@router.get(
    "/{todo_id}",
    summary="Récupérer un todo",
    response_model=TodoOut,
)
def get_todo(
    todo_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    svc: TodoService = Depends(get_todo_service),
):
    return TodoOut.model_validate(svc.get(todo_id, user_id=user_id))

@router.put(
    "/{todo_id}",
    summary="Mettre à jour un todo",
    description="Mise à jour partielle : champ absent = inchangé, `null` = effacé.",
    response_model=TodoOut,
)
def update_todo(
    payload: TodoUpdateIn,
    todo_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    svc: TodoService = Depends(get_todo_service),
):
    return TodoOut.model_validate(svc.update(todo_id, payload, user_id=user_id))

@router.patch(
    "/{todo_id}/toggle",
    summary="Basculer l'état terminé d'un todo",
    response_model=TodoOut,
)
def toggle_todo(
    todo_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    svc: TodoService = Depends(get_todo_service),
):
    return TodoOut.model_validate(svc.toggle(todo_id, user_id=user_id))

@router.delete(
    "/{todo_id}",
    summary="Supprimer un todo",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_todo(
    todo_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    svc: TodoService = Depends(get_todo_service),
):
    svc.delete(todo_id, user_id=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
