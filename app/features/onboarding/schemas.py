from typing import Optional
from pydantic import Field

from app.core.schemas import CamelModel


class OnboardingCompleteIn(CamelModel):
    name: Optional[str] = Field(None, examples=["Alice"])
    timezone: Optional[str] = Field(None, examples=["Europe/Paris"])
    motivation_quote: Optional[str] = Field(None, examples=["Small steps every day."])


class OnboardingStatusOut(CamelModel):
    id: int
    name: Optional[str] = None
    email: str
    timezone: Optional[str] = None
    motivation_quote: Optional[str] = None
    onboarded: bool


class OnboardingCompleteOut(CamelModel):
    message: str
    user: OnboardingStatusOut
