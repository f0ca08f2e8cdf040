"""User model definitions."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from training_center.database import Base


class User(Base):
    """Represents a login identity shared by every account type."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(100), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)

    trainer = relationship(
        "Trainer",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )
    training_center = relationship(
        "TrainingCenter",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )
    roles = relationship(
        "RoleAssignment",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    @property
    def role_ids(self) -> list[int]:
        return [assignment.role_id for assignment in self.roles]
