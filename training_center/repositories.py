"""Repositories for the account tables.

Each repository wraps a SQLAlchemy session and exposes create, lookup,
update and delete helpers for one model. Repositories only flush; callers
decide when to commit, normally through ``database.transaction``.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session, selectinload

from training_center.database import Base
from training_center.models.role_assignment import Role, RoleAssignment
from training_center.models.trainer import Trainer
from training_center.models.training_center import TrainingCenter
from training_center.models.user import User

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def _query(self, relations: tuple[str, ...]):
        query = self.db.query(self.model)
        for relation in relations:
            query = query.options(selectinload(getattr(self.model, relation)))
        return query

    def create(self, **values: Any) -> ModelT:
        record = self.model(**values)
        self.db.add(record)
        self.db.flush()
        return record

    def get_by_id(self, record_id: int, *relations: str) -> ModelT | None:
        return self._query(relations).filter(self.model.id == record_id).first()

    def get_by_field(self, field: str, value: Any, *relations: str) -> ModelT | None:
        return self._query(relations).filter(getattr(self.model, field) == value).first()

    def list_all(self, *relations: str) -> list[ModelT]:
        return self._query(relations).order_by(self.model.id.asc()).all()

    def update(self, record: ModelT, **values: Any) -> ModelT:
        for field, value in values.items():
            setattr(record, field, value)
        self.db.flush()
        return record

    def delete(self, record: ModelT) -> None:
        self.db.delete(record)
        self.db.flush()


class UserRepository(Repository[User]):
    model = User

    def get_by_email(self, email: str) -> User | None:
        return self.get_by_field("email", email)

    def list_trainers(self) -> list[User]:
        """Users that own a trainer profile, with the profile loaded."""
        return [user for user in self.list_all("trainer") if user.trainer is not None]


class TrainerRepository(Repository[Trainer]):
    model = Trainer

    def get_by_user_id(self, user_id: int) -> Trainer | None:
        return self.get_by_field("user_id", user_id)


class TrainingCenterRepository(Repository[TrainingCenter]):
    model = TrainingCenter


class RoleAssignmentRepository(Repository[RoleAssignment]):
    model = RoleAssignment

    def assign(self, user: User, role: Role) -> RoleAssignment:
        return self.create(user_id=user.id, role_id=int(role))
