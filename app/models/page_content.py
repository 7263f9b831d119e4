"""ORM model for editable page sections (hero, cta, ...)."""

from sqlalchemy import Column, DateTime, Integer, Text, func

from app.models.base import Base, JSONType


class PageContent(Base):
    __tablename__ = "page_content"

    id = Column(Integer, primary_key=True, autoincrement=True)
    section = Column(Text, nullable=False, unique=True)
    content = Column(JSONType, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
