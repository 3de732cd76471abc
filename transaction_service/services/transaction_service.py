"""Transacciones y protocolo de ajuste de stock.

Cada alta, modificación o baja sigue el mismo orden:

1. validaciones locales (tipo de transacción, ids),
2. leer el stock actual del product service,
3. calcular el nuevo stock (``services.stock``),
4. escribir el nuevo stock en el product service,
5. guardar el cambio local.

No hay transacción distribuida ni compensación: si el paso 5 falla después
de un paso 4 exitoso, el stock queda actualizado sin registro local. Tampoco
hay bloqueo entre la lectura y la escritura del stock, así que dos
operaciones concurrentes sobre el mismo producto pueden pisarse (gana la
última escritura).
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from transaction_service.exceptions import InvalidRequestError, NotFoundError
from transaction_service.models import Transaction, TransactionType
from transaction_service.schemas.transaction import TransactionCreate, TransactionUpdate
from transaction_service.services.product_client import ProductServiceClient
from transaction_service.services.stock import stock_after_create, stock_after_delete, stock_after_update

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def total_price(quantity: int, unit_price: Decimal) -> Decimal:
    return (Decimal(quantity) * unit_price).quantize(CENTS)


class TransactionService:
    def __init__(self, db: Session, products: ProductServiceClient):
        self.db = db
        self.products = products

    # Consultas

    def get_all_transactions(self) -> List[Transaction]:
        """Todas las transacciones, más recientes primero"""
        return self.db.query(Transaction).order_by(
            Transaction.transaction_date.desc(), Transaction.transaction_id.desc()
        ).all()

    def get_transactions_by_product(self, product_id: int) -> List[Transaction]:
        return self.db.query(Transaction).filter(
            Transaction.product_id == product_id
        ).order_by(
            Transaction.transaction_date.desc(), Transaction.transaction_id.desc()
        ).all()

    def get_transaction(self, transaction_id: int) -> Transaction:
        transaction = self.db.query(Transaction).filter(
            Transaction.transaction_id == transaction_id
        ).first()
        if not transaction:
            raise NotFoundError(f"Transaction with ID {transaction_id} not found")
        return transaction

    def _get_type(self, type_id: int) -> TransactionType:
        transaction_type = self.db.query(TransactionType).filter(
            TransactionType.transaction_type_id == type_id
        ).first()
        if not transaction_type:
            raise InvalidRequestError("Invalid transaction type")
        return transaction_type

    # Comandos

    def create_transaction(self, data: TransactionCreate) -> Transaction:
        transaction_type = self._get_type(data.transaction_type_id)

        product = self.products.get_product(data.product_id)
        new_stock = stock_after_create(transaction_type.direction, product.stock, data.quantity)
        logger.info(
            f"[TRANSACTIONS] {transaction_type.type} x{data.quantity} on product {data.product_id}: "
            f"stock {product.stock} -> {new_stock}"
        )

        # El stock se escribe antes de guardar la transacción
        self.products.set_stock(data.product_id, new_stock)

        now = utcnow()
        transaction = Transaction(
            transaction_date=now,
            transaction_type_id=transaction_type.transaction_type_id,
            product_id=data.product_id,
            quantity=data.quantity,
            unit_price=data.unit_price,
            total_price=total_price(data.quantity, data.unit_price),
            details=data.details,
            created_at=now,
        )
        self.db.add(transaction)
        self.db.commit()
        self.db.refresh(transaction)

        logger.info(f"[TRANSACTIONS] Created transaction {transaction.transaction_id}")
        return transaction

    def update_transaction(self, transaction_id: int, data: TransactionUpdate) -> Transaction:
        if data.transaction_id is not None and data.transaction_id != transaction_id:
            raise InvalidRequestError("Transaction ID mismatch")

        existing = self.get_transaction(transaction_id)
        self._get_type(data.transaction_type_id)

        quantity_diff = data.quantity - existing.quantity
        if quantity_diff != 0:
            # El ajuste usa la dirección del tipo guardado
            direction = existing.transaction_type.direction
            product = self.products.get_product(data.product_id)
            new_stock = stock_after_update(direction, product.stock, existing.quantity, data.quantity)
            logger.info(
                f"[TRANSACTIONS] Transaction {transaction_id} quantity {existing.quantity} -> {data.quantity}: "
                f"stock of product {data.product_id} {product.stock} -> {new_stock}"
            )
            self.products.set_stock(data.product_id, new_stock)

        if data.transaction_date is not None:
            existing.transaction_date = data.transaction_date
        existing.transaction_type_id = data.transaction_type_id
        existing.product_id = data.product_id
        existing.quantity = data.quantity
        existing.unit_price = data.unit_price
        existing.total_price = total_price(data.quantity, data.unit_price)
        existing.details = data.details

        self.db.commit()
        self.db.refresh(existing)
        return existing

    def delete_transaction(self, transaction_id: int):
        transaction = self.get_transaction(transaction_id)

        product = self.products.get_product(transaction.product_id)
        new_stock = stock_after_delete(transaction.transaction_type.direction, product.stock, transaction.quantity)
        logger.info(
            f"[TRANSACTIONS] Reverting transaction {transaction_id}: "
            f"stock of product {transaction.product_id} {product.stock} -> {new_stock}"
        )
        self.products.set_stock(transaction.product_id, new_stock)

        self.db.delete(transaction)
        self.db.commit()
        logger.info(f"[TRANSACTIONS] Deleted transaction {transaction_id}")
