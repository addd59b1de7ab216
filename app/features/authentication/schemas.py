from typing import Optional
from pydantic import Field

from app.core.schemas import CamelModel
from app.features.users.schemas import UserOut

# ---------- Inputs ----------
# Champs optionnels : la présence est vérifiée par le service (message métier clair).

class RegisterIn(CamelModel):
    email: Optional[str] = Field(None, examples=["a@b.com"])
    password: Optional[str] = Field(None, max_length=128)
    name: Optional[str] = Field(None, examples=["Alice"])

class LoginIn(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


# ---------- Outputs ----------

class AuthOut(CamelModel):
    token: str
    user: UserOut
