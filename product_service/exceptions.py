"""Excepciones de dominio del servicio de productos.

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
