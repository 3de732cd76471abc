from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.orm import Session

from transaction_service.core.config import settings
from transaction_service.db import get_db
from transaction_service.schemas.base import MAX_INT
from transaction_service.services.product_client import ProductServiceClient
from transaction_service.services.transaction_service import TransactionService

# Id en la ruta, acotado al rango de la columna
IdPath = Annotated[int, Path(le=MAX_INT)]


def get_product_client():
    client = ProductServiceClient(
        settings.product_service_base_url,
        timeout=settings.product_service_timeout,
    )
    try:
        yield client
    finally:
        client.close()


def get_transaction_service(
    db: Session = Depends(get_db),
    products: ProductServiceClient = Depends(get_product_client),
) -> TransactionService:
    return TransactionService(db, products)
