"""Aritmética de stock para el protocolo de ajuste.

Cada función recibe el stock actual leído del product service y devuelve el
nuevo valor absoluto a escribir. Los guardas son asimétricos a propósito:
la creación solo valida salidas (OUT) contra el stock disponible, mientras
que actualización y eliminación rechazan cualquier resultado negativo.
"""

from transaction_service.exceptions import InsufficientStockError, NegativeStockError
from transaction_service.models.transaction_type import StockDirection


def stock_after_create(direction: StockDirection, current_stock: int, quantity: int) -> int:
    if direction is StockDirection.OUT and quantity > current_stock:
        raise InsufficientStockError(current_stock)
    return current_stock + direction.sign * quantity


def stock_after_update(direction: StockDirection, current_stock: int, old_quantity: int, new_quantity: int) -> int:
    # Aumentar una salida consume más stock; aumentar una entrada lo repone
    new_stock = current_stock + direction.sign * (new_quantity - old_quantity)
    if new_stock < 0:
        raise NegativeStockError("Update would result in negative stock")
    return new_stock


def stock_after_delete(direction: StockDirection, current_stock: int, quantity: int) -> int:
    # Deshacer: restar una entrada, devolver una salida
    new_stock = current_stock - direction.sign * quantity
    if new_stock < 0:
        raise NegativeStockError("Deletion would result in negative stock")
    return new_stock
