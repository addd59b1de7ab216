"""
➡️ But : Construire l'engine SQLModel et fournir une session par requête.

engine : SQLite par défaut (SQLITE_PATH), ou toute URL SQLAlchemy via DATABASE_URL.
Sous SQLite, les clés étrangères sont activées à chaque connexion : la suppression
d'un utilisateur emporte ses données, celle d'une catégorie détache ses todos.

init_db() : crée les tables manquantes au démarrage.

get_session() : dépendance FastAPI (Depends(get_session)), remplacée dans les tests.
"""

import logging
from typing import Dict, Any
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy import event
from sqlalchemy.engine import Engine

# Import all models for creating all tables
from app.db.models.users import User
from app.db.models.categories import Category
from app.db.models.todos import Todo
from app.db.models.checklist_items import TodoChecklistItem
from app.db.models.oauth_states import OAuthState

from app.core.config import settings

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite n'applique les FK (CASCADE / SET NULL) que si on le demande, connexion par connexion."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _build_engine() -> Engine:
    url = settings.DATABASE_URL
    assert url, "DATABASE_URL must be set"

    is_sqlite = url.startswith("sqlite:")

    connect_args: Dict[str, Any] = {}
    if is_sqlite:
        # la session traverse le threadpool de FastAPI
        connect_args["check_same_thread"] = False

    # echo seulement en dev pour ne pas polluer les logs en prod
    engine = create_engine(
        url,
        echo=(settings.ENV == "dev"),
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres/MySQL ; inutile pour SQLite
    )
    if is_sqlite:
        enable_sqlite_foreign_keys(engine)
    return engine

engine: Engine = _build_engine()

def init_db() -> None:
    """Crée les tables si elles n'existent pas. Pas de migrations : schéma géré par les modèles."""
    SQLModel.metadata.create_all(engine)
    logger.info("Database ready (%s)", engine.url.render_as_string(hide_password=True))


def get_session():
    """Une session par requête, fermée à la fin de la réponse."""
    with Session(engine) as session:
        yield session
