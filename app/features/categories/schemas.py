from typing import Optional
from pydantic import Field

from app.core.schemas import CamelModel, UtcDatetime

HEX_COLOR = r"^#(?:[0-9a-fA-F]{3}){1,2}$"

# ---------- IN / UPDATE ----------

class CategoryCreateIn(CamelModel):
    name: Optional[str] = Field(None, examples=["Work"])
    color: Optional[str] = Field(None, pattern=HEX_COLOR, examples=["#f97316"])


class CategoryUpdateIn(CamelModel):
    """Mise à jour partielle : seuls les champs présents dans le body sont modifiés."""
    name: Optional[str] = None
    color: Optional[str] = Field(None, pattern=HEX_COLOR)


# ---------- OUT ----------

class CategoryOut(CamelModel):
    id: int
    name: str
    color: str
    user_id: int
    created_at: UtcDatetime
    updated_at: UtcDatetime
