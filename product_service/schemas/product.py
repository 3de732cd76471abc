from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import Field

from .base import MAX_INT, CamelModel, Money

# Un solo segmento tras /images/products/, sin "." ni ".." como nombre
IMAGE_URL_PATTERN = r"^(/images/products/[^/.][^/]*|https?://.*|)$"

Price = Annotated[Money, Field(gt=Decimal("0"), max_digits=18, decimal_places=2)]


class ProductBase(CamelModel):
    name: str = Field(..., min_length=3, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    category_id: int = Field(..., ge=1, le=MAX_INT)
    image_url: Optional[str] = Field(None, max_length=500, pattern=IMAGE_URL_PATTERN)
    price: Price
    stock: int = Field(..., ge=0, le=MAX_INT)


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    # Si viene en el cuerpo debe coincidir con el id de la ruta
    product_id: Optional[int] = Field(None, le=MAX_INT)


class StockUpdate(CamelModel):
    # Sin regla de negocio: solo el rango de la columna
    stock: int = Field(..., ge=-MAX_INT - 1, le=MAX_INT)


class ProductResponse(CamelModel):
    product_id: int
    name: str
    description: Optional[str] = None
    category_id: int
    category_name: str
    image_url: Optional[str] = None
    price: Money
    stock: int
    created_at: datetime
    updated_at: datetime


class ImageUploadResponse(CamelModel):
    image_url: str
