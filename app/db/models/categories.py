from sqlmodel import Field
from sqlalchemy import Column, ForeignKey, Integer

from .base import BaseModelDB

DEFAULT_CATEGORY_COLOR = "#3b82f6"

class Category(BaseModelDB, table=True):
    """Catégories personnelles d'un utilisateur (noms non uniques)."""

    name: str = Field(description="Nom de la catégorie (ex: 'Work', 'Health', etc.)")
    color: str = Field(
        default=DEFAULT_CATEGORY_COLOR,
        max_length=7,
        description="Code couleur hexadécimal au format #RRGGBB ou #RGB",
    )

    user_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("user.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Propriétaire",
    )
