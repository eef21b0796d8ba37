"""
Database configuration - SQLAlchemy persistence layer
"""
import logging
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base
from resort.config import settings

logger = logging.getLogger(__name__)

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency: one database session per request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create all tables"""
    from resort.models import entities  # noqa
    Base.metadata.create_all(bind=engine)


def ping_database(db) -> None:
    """Run a trivial query; raises SQLAlchemyError when the database is unreachable"""
    db.execute(text("SELECT 1"))
