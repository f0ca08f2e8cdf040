"""Trainer profile model definitions."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from training_center.database import Base


class Trainer(Base):
    """Profile of a trainer account created by a training center."""
    __tablename__ = "trainers"

    id = Column(Integer, primary_key=True)
    email = Column(String(100), nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)

    user = relationship("User", back_populates="trainer")
