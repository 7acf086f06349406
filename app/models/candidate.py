"""Candidate model."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from app.db.base import Base, JSONType


class Candidate(Base):
    """Job applicant."""

    __tablename__ = "candidates"

    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), nullable=True, index=True)  # lower-cased, not unique
    phone = Column(String(50), nullable=True)
    skills = Column(JSONType, default=list, nullable=False)  # ["python", "react", ...]

    # Relationships
    applications = relationship("Application", back_populates="candidate", passive_deletes="all")

    def __repr__(self):
        return f"<Candidate {self.name}>"
