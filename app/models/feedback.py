"""Interview feedback model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.db.base import Base


class Feedback(Base):
    """Qualitative note on an application. Sentiment is fixed at write time."""

    __tablename__ = "feedback"

    application_id = Column(Integer, ForeignKey("applications.id"), nullable=False, index=True)
    by = Column(String(255), nullable=False, default="Admin")
    text = Column(Text, nullable=False)
    sentiment_score = Column(Integer, nullable=False, default=0)
    sentiment_label = Column(String(10), nullable=False, default="neutral")  # positive, negative, neutral

    application = relationship("Application", back_populates="feedback")

    def __repr__(self):
        return f"<Feedback {self.application_id} ({self.sentiment_label})>"
