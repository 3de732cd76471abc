from transaction_service.db import Base
from .transaction_type import StockDirection, TransactionType
from .transaction import Transaction

__all__ = ["Base", "StockDirection", "TransactionType", "Transaction"]
