"""ORM model for social profile links shown on the landing page."""

from sqlalchemy import Column, Integer, Text

from app.models.base import Base


class SocialLink(Base):
    """
    One social profile card. platform and icon are free-form keys the frontend maps to artwork.

    order is a display rank; it need not be unique or contiguous.
    """

    __tablename__ = "social_links"

    id = Column(Integer, primary_key=True, autoincrement=True)
    platform = Column(Text, nullable=False)
    name = Column(Text, nullable=False)
    url = Column(Text, nullable=False)
    icon = Column(Text, nullable=False)
    color = Column(Text, nullable=False)
    username = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    order = Column(Integer, nullable=False)
