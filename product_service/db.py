import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from product_service.core.config import settings

logger = logging.getLogger(__name__)

engine = create_engine(
    settings.database_url,
    connect_args={"check_same_thread": False} if "sqlite" in settings.database_url else {}
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


# Dependencia para obtener sesión de base de datos
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind=None):
    """Crear todas las tablas"""
    # Importar todos los modelos para asegurar que están registrados
    from product_service.models import Category, Product  # noqa: F401

    logger.info("[DB] Creating tables...")
    Base.metadata.create_all(bind=bind or engine)
    logger.info("[DB] Tables created successfully")
