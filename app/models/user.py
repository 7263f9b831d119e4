"""ORM model for dashboard accounts."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, func

from app.models.base import Base


class User(Base):
    """
    Account that can sign in to the admin dashboard.

    password holds '<hex scrypt key>.<hex salt>', never the plain password.
    Only accounts with is_admin=True may hold a session.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(Text, nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
