import enum

from sqlalchemy import Column, Integer, String

from transaction_service.db import Base


class StockDirection(str, enum.Enum):
    IN = "IN"
    OUT = "OUT"

    @property
    def sign(self) -> int:
        """+1 si la transacción suma stock, -1 si lo resta"""
        return 1 if self is StockDirection.IN else -1


class TransactionType(Base):
    __tablename__ = "transaction_types"

    transaction_type_id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    type = Column(String(3), nullable=False)

    @property
    def direction(self) -> StockDirection:
        return StockDirection(self.type)

    def __repr__(self):
        return f"<TransactionType(name='{self.name}', type='{self.type}')>"
