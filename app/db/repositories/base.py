from typing import Any, Generic, Iterable, List, Optional, Sequence, Type, TypeVar
from sqlmodel import SQLModel, Session, select

from app.db.models.base import utcnow

# Type générique pour le modèle (User, Todo, etc.)
ModelT = TypeVar("ModelT", bound=SQLModel)

class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards.

    👉 Ne contient aucune logique métier.
    👉 Gère la persistance générique : create, read, update, delete.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    👉 commit=False permet d'orchestrer une transaction globale au niveau service.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- READ ----------

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        return self.session.get(self.model, id_)

    def get_owned(self, id_: Any, user_id: int) -> Optional[ModelT]:
        """
        Retourne l'enregistrement seulement s'il appartient à user_id.
        Un enregistrement d'un autre utilisateur est traité comme absent.
        """
        statement = (
            select(self.model)
            .where(self.model.id == id_)
            .where(self.model.user_id == user_id)
        )
        return self.session.exec(statement).first()

    # ---------- CREATE ----------

    def create(self, *, commit: bool = True, **fields) -> ModelT:
        """Crée et persiste un nouvel enregistrement."""
        entity = self.model(**fields)
        self.session.add(entity)
        self._flush_or_commit(entity, commit)
        return entity

    def create_many(self, rows: Iterable[dict], *, commit: bool = True) -> List[ModelT]:
        """Crée plusieurs enregistrements dans la même transaction."""
        entities = [self.model(**row) for row in rows]
        self.session.add_all(entities)
        if commit:
            self.session.commit()
            for entity in entities:
                self.session.refresh(entity)
        else:
            self.session.flush()
        return entities

    # ---------- UPDATE ----------

    def update(self, entity: ModelT, *, commit: bool = True, **changes) -> ModelT:
        """Applique les changements fournis (et seulement eux) puis persiste."""
        for key, value in changes.items():
            setattr(entity, key, value)
        if hasattr(entity, "updated_at"):
            entity.updated_at = utcnow()
        self.session.add(entity)
        self._flush_or_commit(entity, commit)
        return entity

    # ---------- DELETE ----------

    def delete(self, entity: ModelT, *, commit: bool = True) -> None:
        self.session.delete(entity)
        if commit:
            self.session.commit()
        else:
            self.session.flush()

    # ---------- HELPERS ----------

    def _flush_or_commit(self, entity: ModelT, commit: bool) -> None:
        if commit:
            self.session.commit()
            self.session.refresh(entity)
        else:
            # flush pour obtenir l'ID sans commit (utile pour FKs)
            self.session.flush()

    def _all(self, statement) -> Sequence[ModelT]:
        return self.session.exec(statement).all()
