from .transaction_type import (
    TransactionTypeBase,
    TransactionTypeCreate,
    TransactionTypeUpdate,
    TransactionTypeResponse
)
from .transaction import (
    TransactionBase,
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse
)
from .product import ProductSnapshot

__all__ = [
    "TransactionTypeBase",
    "TransactionTypeCreate",
    "TransactionTypeUpdate",
    "TransactionTypeResponse",
    "TransactionBase",
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionResponse",
    "ProductSnapshot"
]
