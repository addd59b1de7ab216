"""
➡️ But : Définir la structure des tables de la base (ORM).

Représente les comptes utilisateurs.

- password : hash bcrypt, absent pour les comptes 100% Google
- google_id : identifiant externe Google (unique), absent pour les comptes mot de passe
- onboarded : passe à True une seule fois, via le workflow d'onboarding
"""

from typing import Optional
from sqlmodel import Field

from .base import BaseModelDB

class User(BaseModelDB, table=True):
    email: str = Field(index=True, unique=True)
    password: Optional[str] = Field(default=None, description="Hash bcrypt")
    google_id: Optional[str] = Field(default=None, index=True, unique=True)

    name: Optional[str] = None
    timezone: Optional[str] = None
    motivation_quote: Optional[str] = None
    onboarded: bool = Field(default=False)
