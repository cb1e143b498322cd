from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from jobportal.core.config import settings


def _engine_kwargs() -> dict:
    if settings.is_sqlite:
        # SQLite connections are shared with the threadpool used by the aggregation executor
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,  # Verify connections before using them
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
    }


# Create SQLAlchemy engine
engine = create_engine(settings.DATABASE_URL, echo=settings.DB_ECHO, **_engine_kwargs())

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Initialize database.

    Imports every model so they are registered on Base.metadata, then creates
    any missing tables. Schema migrations are not managed by this service.
    """
    from jobportal import models  # noqa: F401  Import models to register them
    Base.metadata.create_all(bind=engine)
