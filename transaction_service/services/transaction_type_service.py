from typing import List

from sqlalchemy.orm import Session

from transaction_service.exceptions import InvalidRequestError, NotFoundError
from transaction_service.models import Transaction, TransactionType
from transaction_service.schemas.transaction_type import TransactionTypeCreate, TransactionTypeUpdate


class TransactionTypeService:
    def __init__(self, db: Session):
        self.db = db

    def get_all_types(self) -> List[TransactionType]:
        return self.db.query(TransactionType).order_by(TransactionType.transaction_type_id).all()

    def get_type(self, type_id: int) -> TransactionType:
        transaction_type = self.db.query(TransactionType).filter(
            TransactionType.transaction_type_id == type_id
        ).first()
        if not transaction_type:
            raise NotFoundError(f"Transaction type with ID {type_id} not found")
        return transaction_type

    def create_type(self, type_data: TransactionTypeCreate) -> TransactionType:
        transaction_type = TransactionType(name=type_data.name, type=type_data.type.value)
        self.db.add(transaction_type)
        self.db.commit()
        self.db.refresh(transaction_type)
        return transaction_type

    def update_type(self, type_id: int, type_data: TransactionTypeUpdate) -> TransactionType:
        """Renombrar un tipo; la dirección (IN/OUT) no cambia"""
        if type_data.transaction_type_id is not None and type_data.transaction_type_id != type_id:
            raise InvalidRequestError("Transaction type ID mismatch")

        transaction_type = self.get_type(type_id)
        transaction_type.name = type_data.name
        self.db.commit()
        return transaction_type

    def delete_type(self, type_id: int):
        transaction_type = self.get_type(type_id)

        in_use = self.db.query(Transaction).filter(Transaction.transaction_type_id == type_id).count()
        if in_use:
            raise InvalidRequestError(
                "Transaction type is in use",
                f"{in_use} transaction(s) reference type {type_id}",
            )

        self.db.delete(transaction_type)
        self.db.commit()
