"""Role assignment model definitions."""

from enum import IntEnum

from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.orm import relationship

from training_center.database import Base


class Role(IntEnum):
    TRAINER = 2
    TRAINING_CENTER = 3


class RoleAssignment(Base):
    """Links a user to one of the fixed role identifiers."""
    __tablename__ = "users_with_roles"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    role_id = Column(Integer, nullable=False)

    user = relationship("User", back_populates="roles")
