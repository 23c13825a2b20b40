# Configuración de base de datos usando SQLAlchemy.
#
# - DESARROLLO LOCAL: SQLite local (session_metadata.db) por defecto
# - PRODUCCIÓN: PostgreSQL u otra base externa, solo si DATABASE_URL está configurada

import logging
from pathlib import Path
from dotenv import load_dotenv
from sqlalchemy import create_engine, event, inspect
from sqlalchemy.orm import sessionmaker, declarative_base

from .config import get_settings

logger = logging.getLogger(__name__)

# Cargar variables de entorno desde .env (solo en desarrollo local)
project_dir = Path(__file__).parent.parent
env_path = project_dir / ".env"
load_dotenv(dotenv_path=env_path)

settings = get_settings()
DATABASE_URL = settings.database_url

IS_EXTERNAL_DB = not DATABASE_URL.startswith("sqlite")

if IS_EXTERNAL_DB:
    logger.info("Usando base de datos externa para metadatos de sesión")
else:
    logger.info(f"Usando SQLite local para metadatos de sesión: {DATABASE_URL}")


def enable_sqlite_savepoints(engine):
    """
    El driver pysqlite maneja BEGIN por su cuenta y rompe los SAVEPOINT.
    Se desactiva ese manejo y SQLAlchemy emite el BEGIN, como indica su documentación.
    """

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine


connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    DATABASE_URL,
    connect_args=connect_args,
    echo=settings.sql_echo,
)
if not IS_EXTERNAL_DB:
    enable_sqlite_savepoints(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def create_tables(bind=None):
    """
    Crea la tabla de metadatos de sesión si no existe.
    No hace migraciones: si la tabla ya existe con otro esquema se deja como está.
    """
    # Importar los modelos para que queden registrados en Base.metadata
    from . import models  # noqa: F401

    bind = bind if bind is not None else engine
    expected_tables = list(Base.metadata.tables.keys())
    Base.metadata.create_all(bind=bind)

    existing_tables = inspect(bind).get_table_names()
    missing_tables = [t for t in expected_tables if t not in existing_tables]
    if missing_tables:
        logger.warning(f"⚠️ Tablas faltantes: {', '.join(missing_tables)}")
    else:
        logger.info(f"✅ Tablas verificadas: {', '.join(expected_tables)}")


def get_db():
    """
    Dependencia para inyectar la sesión de DB en los endpoints de FastAPI.
    El commit lo hace el endpoint; el gestor de metadatos no confirma por su cuenta.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
