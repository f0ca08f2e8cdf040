"""Training center profile model definitions."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from training_center.database import Base


class TrainingCenter(Base):
    """Profile of a self-registered training center."""
    __tablename__ = "training_centers"

    id = Column(Integer, primary_key=True)
    # email and hashed_password are copied from the owning user at registration.
    email = Column(String(100), nullable=False)
    hashed_password = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    tax_identity_number = Column(String, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)

    user = relationship("User", back_populates="training_center")
