"""Excepciones de dominio del servicio de transacciones.

Los servicios las lanzan; ``core.errors`` las traduce al sobre JSON
``{"message": ..., "error": ...}`` con el código HTTP correspondiente.
"""

from typing import Optional


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error = error


class InvalidRequestError(ServiceError):
    status_code = 400


class NotFoundError(ServiceError):
    status_code = 404


class InsufficientStockError(InvalidRequestError):
    """Una salida (OUT) pide más unidades de las que hay"""

    def __init__(self, current_stock: int):
        super().__init__(f"Insufficient stock. Current stock: {current_stock}")
        self.current_stock = current_stock


class NegativeStockError(InvalidRequestError):
    """El ajuste dejaría el stock del producto por debajo de cero"""


class ProductLookupError(InvalidRequestError):
    """No se pudo leer el producto del product service"""


class StockUpdateError(ServiceError):
    """El product service rechazó (o no recibió) la escritura de stock"""

    status_code = 500
