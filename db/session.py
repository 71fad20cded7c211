# WORKFLOW: Database session management and connection handling.
# Used by: Seed script, loader, store queries
# Functions:
# 1. get_db() - Yield a session and close it after use
# 2. init_db() - Create the currency_day table
# 3. check_db_connection() - Health check for database connectivity
#
# Database lifecycle:
# Startup: init_db() -> Create tables -> Check connection
# Runtime: get_db() -> Session -> Query -> Close session

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from core.config import settings
import logging

logger = logging.getLogger(__name__)

# Lazy-loaded database engine and session factory
_engine = None
_SessionLocal = None


def get_engine():
    """Get database engine (lazy-loaded)."""
    global _engine
    if _engine is None:
        connect_args = {}
        if settings.database_url.startswith("postgresql"):
            connect_args["options"] = "-c timezone=utc"

        _engine = create_engine(
            settings.database_url,
            pool_pre_ping=True,
            echo=settings.debug,
            connect_args=connect_args
        )
    return _engine


def get_session_factory():
    """Get session factory (lazy-loaded)."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _SessionLocal


def get_db():
    """
    Get a database session.
    Yields a database session and ensures it's closed after use.
    """
    SessionLocal = get_session_factory()
    db = SessionLocal()
    logger.debug("Database session created")
    try:
        yield db
    except Exception as e:
        logger.error(f"Database session error: {e}")
        db.rollback()
        raise
    finally:
        db.close()
        logger.debug("Database session closed")


def init_db():
    """
    Initialize database tables.
    """
    from db.models import Base

    try:
        engine = get_engine()
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created successfully")

    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise


def check_db_connection() -> bool:
    """
    Check if database connection is working.
    """
    try:
        engine = get_engine()
        with engine.connect() as conn:
            conn.execute(text("SELECT 1")).fetchone()
        return True
    except Exception as e:
        logger.error(f"Database connection check failed: {e}")
        return False
