from .category import (
    CategoryBase,
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse
)
from .product import (
    ProductBase,
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    StockUpdate,
    ImageUploadResponse
)

__all__ = [
    "CategoryBase",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "ProductBase",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "StockUpdate",
    "ImageUploadResponse"
]
