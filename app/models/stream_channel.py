"""ORM model for stream channel listings."""

from sqlalchemy import Column, Integer, Text

from app.models.base import Base


class StreamChannel(Base):
    """Stream channel card; type is 'primary' or 'secondary' (enforced by the API schemas)."""

    __tablename__ = "stream_channels"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    type = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    platform = Column(Text, nullable=False)
    url = Column(Text, nullable=False)
    color = Column(Text, nullable=False)
    order = Column(Integer, nullable=False)
