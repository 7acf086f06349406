"""Notification model."""

from sqlalchemy import Column, String

from app.db.base import Base, JSONType


class Notification(Base):
    """Append-only event log entry."""

    __tablename__ = "notifications"

    type = Column(String(100), nullable=False, index=True)  # application.stageChanged, job.externalPostStub
    payload = Column(JSONType, nullable=True)

    def __repr__(self):
        return f"<Notification {self.type}>"
