import logging
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Cookie, Depends, status
from fastapi.responses import RedirectResponse

from app.api.dependencies import (
    get_auth_service,
    get_current_user_id,
    get_oauth_service,
)
from app.core.config import settings
from app.features.authentication.google import OAuthError
from app.features.authentication.services import AuthService, OAuthService
from app.features.authentication.schemas import RegisterIn, LoginIn, AuthOut
from app.features.users.schemas import UserOut

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses={404: {"description": "Not Found"}},
)


def _frontend_callback(**params: str) -> RedirectResponse:
    url = f"{settings.FRONTEND_URL.rstrip('/')}/auth/callback?{urlencode(params)}"
    response = RedirectResponse(url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
    # le handshake est terminé : la session OAuth ne doit pas survivre
    response.delete_cookie(key=settings.OAUTH_SESSION_COOKIE_NAME, path=settings.AUTH_COOKIE_PATH)
    return response

# -----------------------------
# Register
# -----------------------------
@router.post(
    "/register",
    summary="Créer un compte",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthOut,
    responses={400: {"description": "Champs manquants ou email déjà utilisé"}},
)
def register(payload: RegisterIn, svc: AuthService = Depends(get_auth_service)):
    return svc.register(payload)

# -----------------------------
# Login
# -----------------------------
@router.post(
    "/login",
    summary="Se connecter",
    response_model=AuthOut,
    responses={401: {"description": "Identifiants invalides"}},
)
def login(payload: LoginIn, svc: AuthService = Depends(get_auth_service)):
    return svc.login(payload)

# -----------------------------
# Me (profil courant)
# -----------------------------
@router.get(
    "/me",
    summary="Récupérer l'utilisateur courant",
    response_model=UserOut,
    responses={
        200: {"description": "Utilisateur courant"},
        401: {"description": "Token absent"},
        403: {"description": "Token invalide ou expiré"},
        404: {"description": "Utilisateur introuvable"},
    },
)
def me(
    user_id: int = Depends(get_current_user_id),
    svc: AuthService = Depends(get_auth_service),
):
    return UserOut.model_validate(svc.get_current_user(user_id))

# -----------------------------
# Google OAuth
# -----------------------------
@router.get(
    "/google",
    summary="Démarrer la connexion Google",
    description="Pose un cookie de session OAuth éphémère et redirige vers Google.",
    status_code=status.HTTP_307_TEMPORARY_REDIRECT,
)
def google_login(svc: OAuthService = Depends(get_oauth_service)):
    try:
        session_key, authorization_url = svc.start()
    except OAuthError as e:
        logger.warning("Google login unavailable: %s", e)
        return _frontend_callback(error="auth_failed")

    response = RedirectResponse(authorization_url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
    response.set_cookie(
        key=settings.OAUTH_SESSION_COOKIE_NAME,
        value=session_key,
        httponly=True,
        samesite=settings.AUTH_COOKIE_SAMESITE,
        secure=settings.AUTH_COOKIE_SECURE,
        max_age=settings.OAUTH_STATE_TTL_MINUTES * 60,
        path=settings.AUTH_COOKIE_PATH,
    )
    return response


@router.get(
    "/google/callback",
    summary="Retour de Google",
    description="Redirige vers le front avec `?token=...`, ou `?error=auth_failed` en cas d'échec.",
    status_code=status.HTTP_307_TEMPORARY_REDIRECT,
)
def google_callback(
    code: Optional[str] = None,
    state: Optional[str] = None,
    error: Optional[str] = None,
    oauth_session: Optional[str] = Cookie(default=None, alias=settings.OAUTH_SESSION_COOKIE_NAME),
    svc: OAuthService = Depends(get_oauth_service),
):
    try:
        token = svc.finish(session_key=oauth_session, state=state, code=code, error=error)
    except OAuthError as e:
        logger.warning("Google login rejected: %s", e)
        return _frontend_callback(error="auth_failed")

    return _frontend_callback(token=token)
