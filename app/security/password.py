"""
Hachage des mots de passe (bcrypt : salé, volontairement lent).

bcrypt est utilisé directement (sans passlib) : passlib casse à
l'initialisation avec bcrypt >= 4.1.
"""

from typing import Optional

import bcrypt

from app.core.config import settings

# bcrypt ne considère que les 72 premiers octets
_MAX_BYTES = 72


def _to_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_BYTES]


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.PASSWORD_HASH_ROUNDS)
    return bcrypt.hashpw(_to_bytes(password), salt).decode("utf-8")


def verify_password(password: str, hashed_password: Optional[str]) -> bool:
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(_to_bytes(password), hashed_password.encode("utf-8"))
    except ValueError:
        # hash stocké illisible
        return False
