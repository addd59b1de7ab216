from typing import Optional
from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.base import utcnow
from app.db.models.oauth_states import OAuthState

class OAuthStateRepository(BaseRepository[OAuthState]):
    model = OAuthState

    def get_by_session_key(self, session_key: str) -> Optional[OAuthState]:
        return self.session.exec(
            select(self.model).where(self.model.session_key == session_key)
        ).first()

    def pop(self, session_key: str) -> Optional[OAuthState]:
        """Récupère ET supprime le handshake : il n'est utilisable qu'une fois."""
        record = self.get_by_session_key(session_key)
        if record is None:
            return None
        # copie détachée : l'instance supprimée expire au commit
        snapshot = OAuthState(
            session_key=record.session_key,
            state=record.state,
            expires_at=record.expires_at,
        )
        self.session.delete(record)
        self.session.commit()
        return snapshot

    def delete_expired(self) -> int:
        now = utcnow()
        expired = self.session.exec(
            select(self.model).where(self.model.expires_at <= now)
        ).all()
        for record in expired:
            self.session.delete(record)
        self.session.commit()
        return len(expired)
