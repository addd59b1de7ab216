"""
➡️ But : Workflow d'onboarding (NOT_ONBOARDED → ONBOARDED, sans retour).

complete() met à jour le profil ET crée les catégories par défaut dans une
seule transaction : soit tout est écrit, soit rien (rollback).
Un second appel sur un compte déjà configuré ne re-crée pas les catégories.
"""

import logging
from sqlmodel import Session

from app.core.errors import NotFoundError, ValidationError
from app.core.schemas import blank_to_none
from app.db.models.users import User
from app.db.repositories.users import UserRepository
from app.db.repositories.categories import CategoryRepository
from app.features.onboarding.schemas import (
    OnboardingCompleteIn,
    OnboardingCompleteOut,
    OnboardingStatusOut,
)

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = (
    {"name": "Work", "color": "#f97316"},
    {"name": "Personal", "color": "#f97316"},
    {"name": "School", "color": "#f97316"},
    {"name": "Health", "color": "#f97316"},
    {"name": "Exercise", "color": "#f97316"},
    {"name": "Learning", "color": "#f97316"},
)


class OnboardingService:
    def __init__(self, session: Session, user_repo: UserRepository, category_repo: CategoryRepository):
        self.session = session
        self.users = user_repo
        self.categories = category_repo

    def _get_user_or_404(self, user_id: int) -> User:
        user = self.users.get(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def get_status(self, user_id: int) -> OnboardingStatusOut:
        return OnboardingStatusOut.model_validate(self._get_user_or_404(user_id))

    def complete(self, payload: OnboardingCompleteIn, *, user_id: int) -> OnboardingCompleteOut:
        name = blank_to_none(payload.name)
        timezone = blank_to_none(payload.timezone)
        if not name or not timezone:
            raise ValidationError("Name and timezone are required")

        user = self._get_user_or_404(user_id)
        if user.onboarded:
            return OnboardingCompleteOut(
                message="Onboarding already completed",
                user=OnboardingStatusOut.model_validate(user),
            )

        # Transaction globale : profil + catégories
        try:
            self.users.update(
                user,
                commit=False,
                name=name,
                timezone=timezone,
                motivation_quote=blank_to_none(payload.motivation_quote),
                onboarded=True,
            )
            self.categories.create_many(
                ({**category, "user_id": user.id} for category in DEFAULT_CATEGORIES),
                commit=False,
            )
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        self.session.refresh(user)
        logger.info("User %s completed onboarding", user.id)
        return OnboardingCompleteOut(
            message="Onboarding completed successfully",
            user=OnboardingStatusOut.model_validate(user),
        )
