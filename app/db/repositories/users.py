"""
➡️ But : Encapsuler toutes les opérations de base de données.

UserRepository : lectures spécifiques à la table User (email, google_id).

Ne contient aucune logique métier, juste de la persistance.
"""

from __future__ import annotations

from typing import Optional
from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.users import User

class UserRepository(BaseRepository[User]):
    """
    Repository pour la table User.
    Hérite du CRUD générique de BaseRepository.
    """
    model = User

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(
            select(self.model).where(self.model.email == email)
        ).first()

    def get_by_google_id(self, google_id: str) -> Optional[User]:
        return self.session.exec(
            select(self.model).where(self.model.google_id == google_id)
        ).first()
