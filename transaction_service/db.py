import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from transaction_service.core.config import settings

logger = logging.getLogger(__name__)

engine = create_engine(
    settings.database_url,
    connect_args={"check_same_thread": False} if "sqlite" in settings.database_url else {}
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# Tipos por defecto: (id, nombre, dirección)
DEFAULT_TRANSACTION_TYPES = [
    (1, "Compra", "IN"),
    (2, "Venta", "OUT"),
]


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind=None):
    """Crear todas las tablas"""
    from transaction_service.models import Transaction, TransactionType  # noqa: F401

    logger.info("[DB] Creating tables...")
    Base.metadata.create_all(bind=bind or engine)
    logger.info("[DB] Tables created successfully")


def seed_transaction_types(db: Session) -> list:
    """Crear los tipos Compra/Venta si la tabla está vacía"""
    from transaction_service.models import TransactionType

    if db.query(TransactionType).count():
        return []

    created = []
    for type_id, name, direction in DEFAULT_TRANSACTION_TYPES:
        db.add(TransactionType(transaction_type_id=type_id, name=name, type=direction))
        created.append(name)
    db.commit()

    logger.info(f"[DB] Seeded transaction types: {created}")
    return created
