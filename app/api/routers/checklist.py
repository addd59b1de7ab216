from fastapi import APIRouter, Depends, Path, Response, status

from app.api.dependencies import get_checklist_service, get_current_user_id
from app.features.checklist.schemas import (
    ChecklistItemCreateIn,
    ChecklistItemUpdateIn,
    ChecklistItemOut,
)
from app.features.checklist.services import ChecklistService

# Routes réparties sur /todos/{id}/checklist et /checklist/{id}
router = APIRouter(
    tags=["checklist"],
    responses={404: {"description": "Not Found"}},
)

@router.post(
    "/todos/{todo_id}/checklist",
    summary="Ajouter une sous-tâche à un todo",
    description="La sous-tâche est ajoutée en fin de liste (orderIndex = max + 1).",
    status_code=status.HTTP_201_CREATED,
    response_model=ChecklistItemOut,
)
def add_checklist_item(
    payload: ChecklistItemCreateIn,
    todo_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    svc: ChecklistService = Depends(get_checklist_service),
):
    return ChecklistItemOut.model_validate(svc.add(todo_id, payload, user_id=user_id))

@router.put(
    "/checklist/{item_id}",
    summary="Mettre à jour une sous-tâche",
    response_model=ChecklistItemOut,
)
def update_checklist_item(
    payload: ChecklistItemUpdateIn,
    item_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    svc: ChecklistService = Depends(get_checklist_service),
):
    return ChecklistItemOut.model_validate(svc.update(item_id, payload, user_id=user_id))

@router.patch(
    "/checklist/{item_id}/toggle",
    summary="Basculer l'état d'une sous-tâche",
    response_model=ChecklistItemOut,
)
def toggle_checklist_item(
    item_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    svc: ChecklistService = Depends(get_checklist_service),
):
    return ChecklistItemOut.model_validate(svc.toggle(item_id, user_id=user_id))

@router.delete(
    "/checklist/{item_id}",
    summary="Supprimer une sous-tâche",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_checklist_item(
    item_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    svc: ChecklistService = Depends(get_checklist_service),
):
    svc.delete(item_id, user_id=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
