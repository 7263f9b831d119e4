"""ORM model for server-side login sessions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func

from app.models.base import Base


class AuthSession(Base):
    """
    Login session. The browser only holds the signed sid; everything else stays here.

    Rows past expires_at are treated as absent and removed on read or by app.session_cleanup.
    """

    __tablename__ = "sessions"

    sid = Column(String(128), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
