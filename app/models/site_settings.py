"""ORM model for the singleton site theme row."""

from sqlalchemy import Column, DateTime, Integer, Text, func

from app.models.base import Base


class SiteSettings(Base):
    __tablename__ = "site_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    primary_color = Column(Text, nullable=False, default="#f97316")
    secondary_color = Column(Text, nullable=False, default="#000000")
    border_radius = Column(Text, nullable=False, default="0.5rem")
    font_family = Column(Text, nullable=False, default="'Inter', sans-serif")
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
