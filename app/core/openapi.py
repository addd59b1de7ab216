"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour
ajouter une description détaillée et les conventions de l'API.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API du tracker d'habitudes / todos (FastAPI + SQLModel).\n\n"
            "### Conventions\n"
            "- Authentification : `Authorization: Bearer <token>` (valable 7 jours).\n"
            "- JSON en camelCase (`completedAt`, `orderIndex`, ...).\n"
            "- Toutes les heures sont en UTC.\n"
            "- Erreurs : `{\"error\": \"message\"}`. Une ressource d'un autre utilisateur renvoie 404.\n"
            "- PUT = mise à jour partielle : champ absent = inchangé.\n"
        ),
        routes=app.routes,
        tags=app.openapi_tags,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
