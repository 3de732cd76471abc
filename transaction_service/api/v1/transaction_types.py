from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from transaction_service.api.deps import IdPath
from transaction_service.core.config import settings
from transaction_service.db import get_db
from transaction_service.schemas.transaction_type import (
    TransactionTypeCreate,
    TransactionTypeResponse,
    TransactionTypeUpdate,
)
from transaction_service.services.transaction_type_service import TransactionTypeService

router = APIRouter()


@router.get("/transactiontypes", response_model=List[TransactionTypeResponse])
def list_transaction_types(db: Session = Depends(get_db)):
    return TransactionTypeService(db).get_all_types()


@router.get("/transactiontypes/{type_id}", response_model=TransactionTypeResponse)
def get_transaction_type(type_id: IdPath, db: Session = Depends(get_db)):
    return TransactionTypeService(db).get_type(type_id)


@router.post("/transactiontypes", response_model=TransactionTypeResponse, status_code=status.HTTP_201_CREATED)
def create_transaction_type(type_data: TransactionTypeCreate, response: Response, db: Session = Depends(get_db)):
    transaction_type = TransactionTypeService(db).create_type(type_data)
    response.headers["Location"] = f"{settings.api_prefix}/transactiontypes/{transaction_type.transaction_type_id}"
    return transaction_type


@router.put("/transactiontypes/{type_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_transaction_type(type_id: IdPath, type_data: TransactionTypeUpdate, db: Session = Depends(get_db)):
    TransactionTypeService(db).update_type(type_id, type_data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/transactiontypes/{type_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_transaction_type(type_id: IdPath, db: Session = Depends(get_db)):
    TransactionTypeService(db).delete_type(type_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
