"""
➡️ But : Définir les formats de sortie d'un utilisateur (couche validation).

UserOut → projection publique : jamais de hash de mot de passe ni de google_id.
"""

from typing import Optional

from app.core.schemas import CamelModel, UtcDatetime

class UserOut(CamelModel):
    id: int
    email: str
    name: Optional[str] = None
    timezone: Optional[str] = None
    motivation_quote: Optional[str] = None
    onboarded: bool
    created_at: UtcDatetime
