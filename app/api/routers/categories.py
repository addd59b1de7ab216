from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from app.api.dependencies import get_category_service, get_current_user_id
from app.features.categories.schemas import CategoryCreateIn, CategoryUpdateIn, CategoryOut
from app.features.categories.services import CategoryService

router = APIRouter(
    prefix="/categories",
    tags=["categories"],
    responses={404: {"description": "Not Found"}},
)

@router.get(
    "",
    summary="Lister mes catégories",
    description="Catégories de l'utilisateur courant, plus anciennes d'abord.",
    response_model=List[CategoryOut],
)
def list_categories(
    user_id: int = Depends(get_current_user_id),
    svc: CategoryService = Depends(get_category_service),
):
    return [CategoryOut.model_validate(c) for c in svc.list(user_id)]

@router.post(
    "",
    summary="Créer une catégorie",
    status_code=status.HTTP_201_CREATED,
    response_model=CategoryOut,
)
def create_category(
    payload: CategoryCreateIn,
    user_id: int = Depends(get_current_user_id),
    svc: CategoryService = Depends(get_category_service),
):
    return CategoryOut.model_validate(svc.create(payload, user_id=user_id))

@router.put(
    "/{category_id}",
    summary="Mettre à jour une catégorie",
    description="Mise à jour partielle : les champs absents du body ne sont pas modifiés.",
    response_model=CategoryOut,
)
def update_category(
    payload: CategoryUpdateIn,
    category_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    svc: CategoryService = Depends(get_category_service),
):
    return CategoryOut.model_validate(svc.update(category_id, payload, user_id=user_id))

@router.delete(
    "/{category_id}",
    summary="Supprimer une catégorie",
    description="Les todos rattachés sont conservés, sans catégorie.",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_category(
    category_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    svc: CategoryService = Depends(get_category_service),
):
    svc.delete(category_id, user_id=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
