from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from transaction_service.db import Base


class Transaction(Base):
    __tablename__ = "transactions"

    transaction_id = Column(Integer, primary_key=True, index=True)
    transaction_date = Column(DateTime(timezone=True), nullable=False, index=True)
    transaction_type_id = Column(
        Integer, ForeignKey("transaction_types.transaction_type_id", ondelete="RESTRICT"), nullable=False
    )
    # Producto de otro servicio: sin FK
    product_id = Column(Integer, nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(18, 2), nullable=False)
    total_price = Column(Numeric(18, 2), nullable=False)
    details = Column(String(500))
    created_at = Column(DateTime(timezone=True), nullable=False)

    transaction_type = relationship("TransactionType", lazy="joined")

    def __repr__(self):
        return f"<Transaction(transaction_id={self.transaction_id}, product_id={self.product_id}, quantity={self.quantity})>"
