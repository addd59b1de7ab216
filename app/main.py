"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l’instance FastAPI (app).

Configure :

CORS (seul le front configuré peut appeler l'API, cookies autorisés)

logs, handlers d'erreurs ({"error": "..."} partout)

titre, version, tags, schéma OpenAPI personnalisé

Inclut les routers (ex : /api/todos) et /health.

Initialise la base au démarrage (@app.on_event("startup")).

Point unique d’exécution : uvicorn app.main:app --reload.
"""

from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.logging import configure_logging
from app.core.openapi import custom_openapi
from app.db.session import init_db

from app.api.routers import authentication, categories, todos, checklist, onboarding, health

import uvicorn

configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    openapi_tags=[
        {"name": "auth", "description": "Inscription, connexion (mot de passe ou Google), profil courant"},
        {"name": "categories", "description": "Catégories de l'utilisateur"},
        {"name": "todos", "description": "Todos de l'utilisateur"},
        {"name": "checklist", "description": "Sous-tâches d'un todo"},
        {"name": "onboarding", "description": "Configuration initiale du compte"},
        {"name": "health", "description": "Supervision"},
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS, allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

register_exception_handlers(app)

# Routers
app.include_router(health.router)
app.include_router(authentication.router, prefix="/api")
app.include_router(categories.router, prefix="/api")
app.include_router(todos.router, prefix="/api")
app.include_router(checklist.router, prefix="/api")
app.include_router(onboarding.router, prefix="/api")

# Front buildé (production) : servi sur "/" s'il existe, après les routes API
if settings.FRONTEND_DIST and Path(settings.FRONTEND_DIST).is_dir():
    app.mount("/", StaticFiles(directory=settings.FRONTEND_DIST, html=True), name="frontend")

# Génération du schéma OpenAPI custom (facultatif, mais propre)
app.openapi = lambda: custom_openapi(app)

# Démarrage
@app.on_event("startup")
def on_startup():
    init_db()

if __name__ == "__main__":
    uvicorn.run("app.main:app", host="127.0.0.1", port=3011, reload=(settings.ENV == "dev")) # http://localhost:3011
