from typing import List

from fastapi import APIRouter, Depends, File, Response, UploadFile, status
from sqlalchemy.orm import Session

from product_service.api.deps import IdPath, get_image_storage
from product_service.core.config import settings
from product_service.db import get_db
from product_service.schemas.product import (
    ImageUploadResponse,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
    StockUpdate,
)
from product_service.services.image_storage import ImageStorage
from product_service.services.product_service import ProductService

router = APIRouter()


@router.get("/products", response_model=List[ProductResponse])
def list_products(db: Session = Depends(get_db)):
    """Listar productos con el nombre de su categoría"""
    return ProductService(db).get_all_products()


@router.get("/products/{product_id}", response_model=ProductResponse)
def get_product(product_id: IdPath, db: Session = Depends(get_db)):
    return ProductService(db).get_product(product_id)


@router.post("/products", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(product_data: ProductCreate, response: Response, db: Session = Depends(get_db)):
    """Crear un nuevo producto"""
    product = ProductService(db).create_product(product_data)
    response.headers["Location"] = f"{settings.api_prefix}/products/{product.product_id}"
    return product


@router.put("/products/{product_id}", response_model=ProductResponse)
def update_product(product_id: IdPath, product_data: ProductUpdate, db: Session = Depends(get_db)):
    return ProductService(db).update_product(product_id, product_data)


@router.put("/products/{product_id}/stock", response_model=ProductResponse)
def update_stock(product_id: IdPath, stock_data: StockUpdate, db: Session = Depends(get_db)):
    """Actualizar solo el stock de un producto (valor absoluto)"""
    return ProductService(db).set_stock(product_id, stock_data.stock)


@router.delete("/products/{product_id}")
def delete_product(product_id: IdPath, db: Session = Depends(get_db)):
    ProductService(db).delete_product(product_id)
    return {"message": "Product deleted successfully"}


@router.post("/products/{product_id}/image", response_model=ImageUploadResponse)
def upload_image(
    product_id: IdPath,
    image: UploadFile = File(...),
    db: Session = Depends(get_db),
    storage: ImageStorage = Depends(get_image_storage),
):
    """Subir la imagen de un producto"""
    content = image.file.read()
    product = ProductService(db).update_image(product_id, image.filename, content, storage)
    return {"image_url": product.image_url}
