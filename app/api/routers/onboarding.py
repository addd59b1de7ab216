from fastapi import APIRouter, Depends

from app.api.dependencies import get_current_user_id, get_onboarding_service
from app.features.onboarding.schemas import (
    OnboardingCompleteIn,
    OnboardingCompleteOut,
    OnboardingStatusOut,
)
from app.features.onboarding.services import OnboardingService

router = APIRouter(
    prefix="/onboarding",
    tags=["onboarding"],
    responses={404: {"description": "Not Found"}},
)

@router.get(
    "/status",
    summary="État d'onboarding de l'utilisateur courant",
    response_model=OnboardingStatusOut,
)
def get_status(
    user_id: int = Depends(get_current_user_id),
    svc: OnboardingService = Depends(get_onboarding_service),
):
    return svc.get_status(user_id)

@router.post(
    "/complete",
    summary="Terminer l'onboarding",
    description="Enregistre le profil et crée les 6 catégories par défaut (une seule fois).",
    response_model=OnboardingCompleteOut,
)
def complete(
    payload: OnboardingCompleteIn,
    user_id: int = Depends(get_current_user_id),
    svc: OnboardingService = Depends(get_onboarding_service),
):
    return svc.complete(payload, user_id=user_id)
