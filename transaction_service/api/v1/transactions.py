from typing import List

from fastapi import APIRouter, Depends, Response, status

from transaction_service.api.deps import IdPath, get_transaction_service
from transaction_service.core.config import settings
from transaction_service.schemas.transaction import TransactionCreate, TransactionResponse, TransactionUpdate
from transaction_service.services.transaction_service import TransactionService

router = APIRouter()


@router.get("/transactions", response_model=List[TransactionResponse])
def list_transactions(service: TransactionService = Depends(get_transaction_service)):
    return service.get_all_transactions()


@router.get("/transactions/product/{product_id}", response_model=List[TransactionResponse])
def list_transactions_by_product(product_id: IdPath, service: TransactionService = Depends(get_transaction_service)):
    """Transacciones de un producto, más recientes primero"""
    return service.get_transactions_by_product(product_id)


@router.get("/transactions/{transaction_id}", response_model=TransactionResponse)
def get_transaction(transaction_id: IdPath, service: TransactionService = Depends(get_transaction_service)):
    return service.get_transaction(transaction_id)


@router.post("/transactions", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
def create_transaction(
    transaction_data: TransactionCreate,
    response: Response,
    service: TransactionService = Depends(get_transaction_service),
):
    """Registrar una transacción y ajustar el stock del producto"""
    transaction = service.create_transaction(transaction_data)
    response.headers["Location"] = f"{settings.api_prefix}/transactions/{transaction.transaction_id}"
    return transaction


@router.put("/transactions/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: IdPath,
    transaction_data: TransactionUpdate,
    service: TransactionService = Depends(get_transaction_service),
):
    return service.update_transaction(transaction_id, transaction_data)


@router.delete("/transactions/{transaction_id}")
def delete_transaction(transaction_id: IdPath, service: TransactionService = Depends(get_transaction_service)):
    """Eliminar una transacción revirtiendo su efecto en el stock"""
    service.delete_transaction(transaction_id)
    return {"message": "Transaction deleted successfully"}
