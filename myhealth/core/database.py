"""Database configuration and session management."""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from typing import Generator

from ..core.config import get_settings

settings = get_settings()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given URL.

    SQLite connections are shared across FastAPI's worker threads and get
    foreign key enforcement switched on for every new connection.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    db_engine = create_engine(
        database_url,
        connect_args=connect_args,
        pool_pre_ping=True,
        echo=echo,
    )

    if db_engine.dialect.name == "sqlite":

        @event.listens_for(db_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return db_engine


# Create database engine
engine = build_engine(settings.DATABASE_URL, echo=settings.debug)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function that yields a database session.

    Usage:
        @router.get("/sessions")
        def list_sessions(db: Session = Depends(get_db)):
            return ChatSessionRegistry(db).list_for_user(user_id)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine = None):
    """Initialize database - create all tables."""
    from ..models import Base

    Base.metadata.create_all(bind=bind or engine)
