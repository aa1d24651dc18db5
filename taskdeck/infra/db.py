from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from taskdeck.config import SETTINGS

Base = declarative_base()


def make_engine(url: str):
    if url in ("sqlite://", "sqlite:///:memory:"):
        # A single shared connection keeps the in-memory database alive.
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, pool_pre_ping=True)


def make_session_factory(url: str) -> sessionmaker:
    from . import models  # noqa: F401

    bound = make_engine(url)
    Base.metadata.create_all(bound)
    return sessionmaker(bind=bound, autoflush=False, autocommit=False)


engine = make_engine(SETTINGS.database_url)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def init_db() -> None:
    from . import models  # noqa: F401

    Base.metadata.create_all(engine)
