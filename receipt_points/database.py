"""
Database connection setup for the score store.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from receipt_points.config import settings

_IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")

# SQLite needs check_same_thread=False when sessions hop between worker threads
connect_args = {}
engine_kwargs = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}
if settings.DATABASE_URL in _IN_MEMORY_URLS:
    # every session must see the same in-memory database
    engine_kwargs["poolclass"] = StaticPool

engine = create_engine(
    settings.DATABASE_URL,
    connect_args=connect_args,
    echo=settings.DEBUG,
    **engine_kwargs,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()
