from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import Field

from .base import MAX_INT, CamelModel, Money
from .transaction_type import TransactionTypeResponse

UnitPrice = Annotated[Money, Field(gt=Decimal("0"), max_digits=18, decimal_places=2)]


class TransactionBase(CamelModel):
    transaction_type_id: int = Field(..., ge=1, le=MAX_INT)
    product_id: int = Field(..., ge=1, le=MAX_INT)
    quantity: int = Field(..., gt=0, le=MAX_INT)
    unit_price: UnitPrice
    details: Optional[str] = Field(None, max_length=500)


class TransactionCreate(TransactionBase):
    """Entrada de creación.

    ``totalPrice``, ``transactionDate`` y ``createdAt`` los calcula el
    servicio; si el cliente los envía se ignoran.
    """


class TransactionUpdate(TransactionBase):
    transaction_id: Optional[int] = Field(None, le=MAX_INT)
    transaction_date: Optional[datetime] = None


class TransactionResponse(CamelModel):
    transaction_id: int
    transaction_date: datetime
    transaction_type_id: int
    transaction_type: Optional[TransactionTypeResponse] = None
    product_id: int
    quantity: int
    unit_price: Money
    total_price: Money
    details: Optional[str] = None
    created_at: datetime
