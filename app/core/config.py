"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, chemin DB, secrets, OAuth, logs...)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from app.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from datetime import timedelta
from typing import List, Optional

from pydantic_settings import BaseSettings
from app.security.tokens import JWTSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Habit-Tracker"
    ENV: str = "dev"  # dev | prod | test
    LOG_LEVEL: str = "INFO"

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "app.db"  # fichier SQLite
    # Si tu veux forcer une URL différente (ex: Postgres), définis DATABASE_URL dans l'env.
    DATABASE_URL: Optional[str] = None

    # -----------------------------
    # JWT / Auth
    # -----------------------------
    JWT_SECRET_KEY: str = "CHANGE_ME"     # ⚠️ change en prod
    JWT_ISSUER: str = "habit-tracker-api"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TTL_DAYS: int = 7              # token unique, sans refresh

    PASSWORD_HASH_ROUNDS: int = 12        # coût bcrypt

    # -----------------------------
    # Front-end
    # -----------------------------
    FRONTEND_URL: str = "http://localhost:5174"
    CORS_ORIGINS: List[str] = []          # vide -> [FRONTEND_URL]
    FRONTEND_DIST: Optional[str] = None   # build statique servi sur "/" si présent

    # -----------------------------
    # Google OAuth
    # -----------------------------
    GOOGLE_CLIENT_ID: Optional[str] = None
    GOOGLE_CLIENT_SECRET: Optional[str] = None
    GOOGLE_CALLBACK_URL: str = "http://localhost:3011/api/auth/google/callback"

    # Cookie de handshake OAuth (ne vit que le temps de l'aller-retour chez Google)
    OAUTH_SESSION_COOKIE_NAME: str = "oauth_session"
    OAUTH_STATE_TTL_MINUTES: int = 10
    AUTH_COOKIE_SAMESITE: str = "lax"     # "lax" | "strict" | "none"
    AUTH_COOKIE_PATH: str = "/api/auth"
    AUTH_COOKIE_SECURE: Optional[bool] = None   # auto selon ENV si None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    @property
    def google_enabled(self) -> bool:
        return bool(self.GOOGLE_CLIENT_ID and self.GOOGLE_CLIENT_SECRET)

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        # DATABASE_URL par défaut depuis SQLITE_PATH si non fourni
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", f"sqlite:///{self.SQLITE_PATH}")

        # Cookie secure auto: true en prod si non spécifié
        if self.AUTH_COOKIE_SECURE is None:
            object.__setattr__(self, "AUTH_COOKIE_SECURE", self.ENV == "prod")

        # CORS: par défaut, seul le front configuré
        if not self.CORS_ORIGINS:
            object.__setattr__(self, "CORS_ORIGINS", [self.FRONTEND_URL])


# Instance globale importable partout
settings = Settings()

# Objet JWT prêt à l'emploi pour les services
jwt_settings = JWTSettings(
    secret=settings.JWT_SECRET_KEY,
    issuer=settings.JWT_ISSUER,
    algorithm=settings.JWT_ALGORITHM,
    access_ttl=timedelta(days=settings.ACCESS_TTL_DAYS),
)
