import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable, Optional

from sqlalchemy.exc import IntegrityError

from app.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from app.core.schemas import blank_to_none
from app.db.models.base import as_utc, utcnow
from app.db.models.users import User
from app.db.repositories.users import UserRepository
from app.db.repositories.oauth_states import OAuthStateRepository
from app.security.password import verify_password, hash_password
from app.security.tokens import JWTSettings, create_access_token
from app.features.authentication.google import GoogleOAuthClient, GoogleProfile, OAuthError
from app.features.authentication.schemas import RegisterIn, LoginIn, AuthOut
from app.features.users.schemas import UserOut

logger = logging.getLogger(__name__)


class AuthService:
    """
    Service d'authentification : orchestre le repository User + tokens.
    Ne contient pas d'accès SQL direct et lève des erreurs métier (app.core.errors).
    """

    def __init__(self, *, user_repo: UserRepository, jwt_settings: JWTSettings):
        self.user_repo = user_repo
        self.jwt = jwt_settings

    def _auth_out(self, user: User) -> AuthOut:
        token = create_access_token(user_id=user.id, settings=self.jwt)
        return AuthOut(token=token, user=UserOut.model_validate(user))

    # ---------- Register ----------
    def register(self, payload: RegisterIn) -> AuthOut:
        email = blank_to_none(payload.email)
        if not email or not payload.password:
            raise ValidationError("Email and password are required")

        if self.user_repo.get_by_email(email):
            raise ConflictError("User already exists")

        try:
            user = self.user_repo.create(
                email=email,
                password=hash_password(payload.password),
                name=blank_to_none(payload.name),
            )
        except IntegrityError as e:
            # inscription concurrente avec le même email
            self.user_repo.session.rollback()
            raise ConflictError("User already exists") from e
        logger.info("User %s registered", user.id)
        return self._auth_out(user)

    # ---------- Login ----------
    def login(self, payload: LoginIn) -> AuthOut:
        email = blank_to_none(payload.email)
        if not email or not payload.password:
            raise ValidationError("Email and password are required")

        user = self.user_repo.get_by_email(email)
        # Compte absent, compte Google sans mot de passe ou mauvais mot de passe :
        # même réponse, on ne révèle pas l'existence du compte
        if not user or not verify_password(payload.password, user.password):
            logger.warning("Failed login attempt")
            raise AuthError("Invalid credentials")

        return self._auth_out(user)

    # ---------- Current user ----------
    def get_current_user(self, user_id: int) -> User:
        user = self.user_repo.get(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    # ---------- Google ----------
    def login_with_google(self, profile: GoogleProfile) -> str:
        """Retrouve (ou crée, sans mot de passe) le compte lié au profil Google et émet un token."""
        user = self.user_repo.get_by_google_id(profile.id)
        if not user:
            if not profile.email:
                raise OAuthError("Google profile has no email")
            if self.user_repo.get_by_email(profile.email):
                # pas de liaison de comptes : l'email appartient déjà à un compte mot de passe
                raise OAuthError("Email already registered with a password account")
            try:
                user = self.user_repo.create(
                    google_id=profile.id,
                    email=profile.email,
                    name=profile.name,
                )
            except IntegrityError as e:
                self.user_repo.session.rollback()
                raise OAuthError("Account created concurrently") from e
            logger.info("User %s created from Google profile", user.id)
        return create_access_token(user_id=user.id, settings=self.jwt)


class OAuthService:
    """
    Handshake OAuth côté serveur.

    L'état (state anti-CSRF) n'est stocké que le temps de l'aller-retour chez Google,
    indexé par une clé de session opaque posée en cookie. Il est supprimé au retour.
    L'autorisation des appels API ne dépend ensuite que du bearer token.
    """

    def __init__(
        self,
        *,
        state_repo: OAuthStateRepository,
        auth_svc: AuthService,
        client: Optional[GoogleOAuthClient],
        state_ttl: timedelta = timedelta(minutes=10),
        now_fn: Callable[[], datetime] = utcnow,
    ):
        self.state_repo = state_repo
        self.auth_svc = auth_svc
        self.client = client
        self.state_ttl = state_ttl
        self.now_fn = now_fn

    def start(self) -> tuple[str, str]:
        """Retourne (clé de session pour le cookie, URL d'autorisation Google)."""
        if self.client is None:
            raise OAuthError("Google OAuth is not configured")

        self.state_repo.delete_expired()
        session_key = secrets.token_urlsafe(32)
        state = secrets.token_urlsafe(24)
        self.state_repo.create(
            session_key=session_key,
            state=state,
            expires_at=self.now_fn() + self.state_ttl,
        )
        return session_key, self.client.authorization_url(state)

    def finish(
        self,
        *,
        session_key: Optional[str],
        state: Optional[str],
        code: Optional[str],
        error: Optional[str] = None,
    ) -> str:
        """Valide le retour du fournisseur et retourne un bearer token. Lève OAuthError sinon."""
        if self.client is None:
            raise OAuthError("Google OAuth is not configured")
        if not session_key:
            raise OAuthError("Missing OAuth session")

        record = self.state_repo.pop(session_key)
        if record is None:
            raise OAuthError("Unknown OAuth session")
        if as_utc(record.expires_at) <= self.now_fn():
            raise OAuthError("OAuth session expired")
        if not state or not secrets.compare_digest(record.state, state):
            raise OAuthError("OAuth state mismatch")
        if error:
            raise OAuthError(f"Provider error: {error}")
        if not code:
            raise OAuthError("Missing authorization code")

        profile = self.client.fetch_profile(code)
        token = self.auth_svc.login_with_google(profile)
        logger.info("Google login succeeded for subject %s", profile.id)
        return token
