from product_service.db import Base
from .category import Category
from .product import Product, NO_CATEGORY_LABEL

__all__ = ["Base", "Category", "Product", "NO_CATEGORY_LABEL"]
