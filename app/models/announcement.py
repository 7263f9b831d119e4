"""ORM model for site announcements."""

from sqlalchemy import Boolean, Column, DateTime, Integer, Text, func

from app.models.base import Base


class Announcement(Base):
    """
    Banner announcement. Shown publicly while active is true and
    expires_at is either null or still in the future.
    """

    __tablename__ = "announcements"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    expires_at = Column(DateTime(timezone=True), nullable=True)
