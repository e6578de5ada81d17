"""Generate database session"""

from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from kingside.core.config import Settings
from kingside.db.schema import Base


def build_engine(settings: Settings) -> Engine:
    """The in-memory SQLite database only lives as long as its connection, so all sessions have to share one."""
    if settings.database_url.startswith("sqlite"):
        return create_engine(
            settings.database_url,
            echo=settings.echo_sql,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(settings.database_url, echo=settings.echo_sql)


def build_session_factory(settings: Settings) -> sessionmaker[Session]:
    engine = build_engine(settings)
    # Ensure all tables are created
    Base.metadata.create_all(bind=engine)
    return sessionmaker(autoflush=False, bind=engine)
