"""
➡️ But : Base commune des schémas d'API.

Le front parle camelCase (completedAt, orderIndex...), le code Python snake_case.
Les schémas acceptent les deux en entrée et sortent en camelCase.
"""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.db.models.base import as_utc

# Toute date traverse l'API en UTC : entrée convertie, sortie suffixée "Z"
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def blank_to_none(value):
    """Chaîne vide ou blanche -> None, sinon chaîne nettoyée."""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value
