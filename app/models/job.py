"""Job opening model."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from app.db.base import Base, JSONType


class Job(Base):
    """Job opening that candidates apply to."""

    __tablename__ = "jobs"

    title = Column(String(500), nullable=False, index=True)
    department = Column(String(255))
    location = Column(String(255))
    type = Column(String(50))  # Full-time, Part-time, Contract
    description = Column(Text)
    description_rich = Column(Text)
    expires_at = Column(DateTime, nullable=True)
    auto_template = Column(Boolean, default=False, nullable=False)
    external_post = Column(Boolean, default=False, nullable=False)
    status = Column(String(20), default="open", nullable=False, index=True)  # open, closed

    # Screening test
    test_enabled = Column(Boolean, default=False, nullable=False)
    test_passing_percent = Column(Integer, nullable=True)
    test = Column(JSONType, nullable=True)  # {"enabled", "passingPercent", "questions": [...]}

    # Relationships
    applications = relationship("Application", back_populates="job", passive_deletes="all")

    def __repr__(self):
        return f"<Job {self.title} ({self.status})>"
