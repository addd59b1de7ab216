from datetime import datetime
from sqlmodel import Field

from .base import BaseModelDB, utc_field

class OAuthState(BaseModelDB, table=True):
    """
    État transitoire du handshake OAuth, indexé par le cookie de session.
    Supprimé dès le retour du fournisseur (succès ou échec).
    """
    session_key: str = Field(index=True, unique=True)
    state: str
    expires_at: datetime = utc_field()
