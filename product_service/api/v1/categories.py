from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from product_service.api.deps import IdPath
from product_service.core.config import settings
from product_service.db import get_db
from product_service.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from product_service.services.category_service import CategoryService

router = APIRouter()


@router.get("/categories", response_model=List[CategoryResponse])
def list_categories(db: Session = Depends(get_db)):
    return CategoryService(db).get_all_categories()


@router.get("/categories/{category_id}", response_model=CategoryResponse)
def get_category(category_id: IdPath, db: Session = Depends(get_db)):
    return CategoryService(db).get_category(category_id)


@router.post("/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(category_data: CategoryCreate, response: Response, db: Session = Depends(get_db)):
    category = CategoryService(db).create_category(category_data)
    response.headers["Location"] = f"{settings.api_prefix}/categories/{category.category_id}"
    return category


@router.put("/categories/{category_id}", response_model=CategoryResponse)
def update_category(category_id: IdPath, category_data: CategoryUpdate, db: Session = Depends(get_db)):
    return CategoryService(db).update_category(category_id, category_data)


@router.delete("/categories/{category_id}")
def delete_category(category_id: IdPath, db: Session = Depends(get_db)):
    CategoryService(db).delete_category(category_id)
    return {"message": "Category deleted successfully"}
