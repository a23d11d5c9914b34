"""
Database connection setup for the SQL receipt store.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


def make_engine(url: str, echo: bool = False, **kwargs):
    # SQLite needs check_same_thread=False when sessions cross worker threads
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    return create_engine(
        url,
        connect_args=connect_args,
        echo=echo,
        **kwargs,
    )


def make_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
