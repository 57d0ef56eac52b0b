"""
Conexión a base de datos (PostgreSQL en producción, SQLite en local/tests)

Este módulo centraliza el acceso a la base de datos:
- SQLAlchemy engine y session factory
- Base declarativa para los modelos
- Dependency de FastAPI para obtener una sesión por request
- Health check de conectividad

Author: TM3
"""
import logging
import time
from typing import Any, Dict, Optional, Tuple

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import settings

logger = logging.getLogger(__name__)


# ============================================================================
# SQLAlchemy Configuration
# ============================================================================

def _engine_options(database_url: str) -> Dict[str, Any]:
    """
    Build create_engine() keyword arguments for the configured backend

    SQLite connections are shared across FastAPI worker threads, and an
    in-memory database must live on a single connection or every session
    would see an empty schema.
    """
    options: Dict[str, Any] = {"echo": settings.DB_ECHO}

    if database_url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in database_url:
            options["poolclass"] = StaticPool
        return options

    options.update(
        pool_pre_ping=True,  # Verificar conexión antes de usar
        pool_size=settings.DB_POOL_SIZE,  # Número de conexiones en el pool
        max_overflow=settings.DB_MAX_OVERFLOW,  # Conexiones extras si se necesitan
    )
    return options


# SQLAlchemy Engine
engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))


if settings.is_sqlite:
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Session Factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base para modelos
Base = declarative_base()


def get_db():
    """
    FastAPI dependency para obtener sesión de SQLAlchemy

    Usage:
        @router.get("/items")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """
    Create all tables registered on Base

    Imports the models package so every table is known to the metadata
    before create_all() runs.
    """
    from kitchen_control import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ready (%s)", engine.url.render_as_string(hide_password=True))


def check_database() -> Tuple[bool, Optional[float], Optional[str]]:
    """
    Run a trivial query to verify connectivity

    Returns:
        Tuple of (connected, latency in ms, error message)
    """
    start = time.time()
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        return False, None, str(e)

    latency_ms = round((time.time() - start) * 1000, 2)
    return True, latency_ms, None
