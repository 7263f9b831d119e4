"""PostgreSQL engine and the ORM session factory shared by the content and session stores."""

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings


def build_session_factory(bind: Engine) -> sessionmaker[Session]:
    """Session factory used by DatabaseStorage and DatabaseSessionStore (one session per operation)."""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=bind)


# No connection is opened until the first query.
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=settings.DEBUG,
)

SessionLocal = build_session_factory(engine)


def check_db_connected(session_factory: sessionmaker[Session]) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        with session_factory() as db:
            db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        return False
