"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_current_user_id() : résout le bearer token en id utilisateur (aucune lecture en base).

get_todo_service() : crée un TodoService à partir d’une session DB.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()), et à remplacer dans les tests
(app.dependency_overrides).
"""

from datetime import timedelta
from typing import Optional

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from app.core.config import settings, jwt_settings
from app.core.errors import AuthError
from app.db.session import get_session
from app.security.tokens import JWTSettings, user_id_from_token

from app.db.repositories.users import UserRepository
from app.db.repositories.oauth_states import OAuthStateRepository
from app.db.repositories.categories import CategoryRepository
from app.db.repositories.todos import TodoRepository
from app.db.repositories.checklist_items import ChecklistItemRepository

from app.features.authentication.google import GoogleOAuthClient
from app.features.authentication.services import AuthService, OAuthService
from app.features.categories.services import CategoryService
from app.features.todos.services import TodoService
from app.features.checklist.services import ChecklistService
from app.features.onboarding.services import OnboardingService


# -----------------------------
# Authentication data
# -----------------------------
bearer_scheme = HTTPBearer(auto_error=False)

def get_jwt_settings() -> JWTSettings:
    return jwt_settings

def get_access_token_from_bearer(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
) -> str:
    if not credentials or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise AuthError("Access token required")
    return credentials.credentials

def get_current_user_id(
    access_token: str = Depends(get_access_token_from_bearer),
    jwt_cfg: JWTSettings = Depends(get_jwt_settings),
) -> int:
    """Identité de l'appelant : signature + expiration du token, rien d'autre."""
    return user_id_from_token(access_token, jwt_cfg)


# -----------------------------
# Repositories
# -----------------------------
def get_user_repository(session: Session = Depends(get_session)) -> UserRepository:
    return UserRepository(session)

def get_oauth_state_repository(session: Session = Depends(get_session)) -> OAuthStateRepository:
    return OAuthStateRepository(session)

def get_category_repository(session: Session = Depends(get_session)) -> CategoryRepository:
    return CategoryRepository(session)

def get_todo_repository(session: Session = Depends(get_session)) -> TodoRepository:
    return TodoRepository(session)

def get_checklist_repository(session: Session = Depends(get_session)) -> ChecklistItemRepository:
    return ChecklistItemRepository(session)


# -----------------------------
# Auth
# -----------------------------
def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repository),
    jwt_cfg: JWTSettings = Depends(get_jwt_settings),
) -> AuthService:
    return AuthService(user_repo=user_repo, jwt_settings=jwt_cfg)

def get_google_client() -> Optional[GoogleOAuthClient]:
    if not settings.google_enabled:
        return None
    return GoogleOAuthClient(
        client_id=settings.GOOGLE_CLIENT_ID,
        client_secret=settings.GOOGLE_CLIENT_SECRET,
        redirect_uri=settings.GOOGLE_CALLBACK_URL,
    )

def get_oauth_service(
    state_repo: OAuthStateRepository = Depends(get_oauth_state_repository),
    auth_svc: AuthService = Depends(get_auth_service),
    client: Optional[GoogleOAuthClient] = Depends(get_google_client),
) -> OAuthService:
    return OAuthService(
        state_repo=state_repo,
        auth_svc=auth_svc,
        client=client,
        state_ttl=timedelta(minutes=settings.OAUTH_STATE_TTL_MINUTES),
    )


# -----------------------------
# Resource services
# -----------------------------
def get_category_service(
    category_repo: CategoryRepository = Depends(get_category_repository),
) -> CategoryService:
    return CategoryService(category_repo)

def get_todo_service(
    session: Session = Depends(get_session),
    todo_repo: TodoRepository = Depends(get_todo_repository),
    category_repo: CategoryRepository = Depends(get_category_repository),
    checklist_repo: ChecklistItemRepository = Depends(get_checklist_repository),
) -> TodoService:
    return TodoService(
        session=session,
        repo=todo_repo,
        category_repo=category_repo,
        checklist_repo=checklist_repo,
    )

def get_checklist_service(
    checklist_repo: ChecklistItemRepository = Depends(get_checklist_repository),
    todo_repo: TodoRepository = Depends(get_todo_repository),
) -> ChecklistService:
    return ChecklistService(repo=checklist_repo, todo_repo=todo_repo)

def get_onboarding_service(
    session: Session = Depends(get_session),
    user_repo: UserRepository = Depends(get_user_repository),
    category_repo: CategoryRepository = Depends(get_category_repository),
) -> OnboardingService:
    return OnboardingService(session=session, user_repo=user_repo, category_repo=category_repo)
