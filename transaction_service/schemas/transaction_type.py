from pydantic import Field
from typing import Optional

from transaction_service.models.transaction_type import StockDirection
from .base import MAX_INT, CamelModel


class TransactionTypeBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=50)
    type: StockDirection


class TransactionTypeCreate(TransactionTypeBase):
    pass


class TransactionTypeUpdate(CamelModel):
    # Solo el nombre es editable
    transaction_type_id: Optional[int] = Field(None, le=MAX_INT)
    name: str = Field(..., min_length=1, max_length=50)


class TransactionTypeResponse(TransactionTypeBase):
    transaction_type_id: int
