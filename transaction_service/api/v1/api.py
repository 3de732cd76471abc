from fastapi import APIRouter

from transaction_service.api.v1 import transaction_types, transactions

api_router = APIRouter()
api_router.include_router(transactions.router, tags=["transactions"])
api_router.include_router(transaction_types.router, tags=["transaction types"])
