"""Application model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.db.base import Base, JSONType


class Application(Base):
    """A candidate's application to a job, carrying its pipeline stage."""

    __tablename__ = "applications"

    job_id = Column(Integer, ForeignKey("jobs.id"), nullable=False, index=True)
    candidate_id = Column(Integer, ForeignKey("candidates.id"), nullable=False, index=True)

    # Pipeline
    stage = Column(String(20), default="applied", nullable=False, index=True)  # see Stage
    notes = Column(Text, nullable=True)

    # Screening test result
    score_percent = Column(Integer, nullable=True)
    passed = Column(Boolean, nullable=True)
    answers = Column(JSONType, nullable=True)  # [{"questionId", "answer"}]

    # Relationships
    job = relationship("Job", back_populates="applications")
    candidate = relationship("Candidate", back_populates="applications")
    feedback = relationship("Feedback", back_populates="application", passive_deletes="all")

    def __repr__(self):
        return f"<Application {self.candidate_id} -> {self.job_id} ({self.stage})>"
