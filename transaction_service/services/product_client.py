import logging
from typing import Optional

import httpx

from transaction_service.exceptions import ProductLookupError, StockUpdateError
from transaction_service.schemas.product import ProductSnapshot

logger = logging.getLogger(__name__)


class ProductServiceClient:
    """Cliente HTTP síncrono del product service.

    Sin reintentos: cualquier fallo se convierte en ``ProductLookupError``
    (lectura) o ``StockUpdateError`` (escritura) y aborta la operación.
    """

    def __init__(self, base_url: str, http: Optional[httpx.Client] = None, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.http = http or httpx.Client(timeout=timeout)

    def _product_url(self, product_id: int) -> str:
        return f"{self.base_url}/api/products/{product_id}"

    def get_product(self, product_id: int) -> ProductSnapshot:
        """Leer el producto actual (stock incluido)"""
        try:
            response = self.http.get(self._product_url(product_id))
        except httpx.HTTPError as e:
            logger.warning(f"[TRANSACTIONS] Product service unreachable reading product {product_id}: {e}")
            raise ProductLookupError("Could not retrieve product information", str(e))

        if not response.is_success:
            logger.warning(
                f"[TRANSACTIONS] Product {product_id} lookup failed: {response.status_code} - {response.text}"
            )
            raise ProductLookupError("Could not retrieve product information", response.text)

        try:
            product = ProductSnapshot.model_validate(response.json())
        except ValueError as e:
            raise ProductLookupError("Could not retrieve product information", f"Invalid product payload: {e}")

        logger.info(f"[TRANSACTIONS] Product {product_id} ({product.name}) current stock: {product.stock}")
        return product

    def set_stock(self, product_id: int, stock: int):
        """Escribir el nuevo stock absoluto"""
        try:
            response = self.http.put(f"{self._product_url(product_id)}/stock", json={"stock": stock})
        except httpx.HTTPError as e:
            logger.warning(f"[TRANSACTIONS] Product service unreachable updating stock of {product_id}: {e}")
            raise StockUpdateError("Error updating product stock", str(e))

        if not response.is_success:
            logger.warning(
                f"[TRANSACTIONS] Stock update for product {product_id} failed: "
                f"{response.status_code} - {response.text}"
            )
            raise StockUpdateError("Error updating product stock", response.text)

        logger.info(f"[TRANSACTIONS] Stock of product {product_id} set to {stock}")

    def close(self):
        self.http.close()
