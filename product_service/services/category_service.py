import logging
from typing import List

from sqlalchemy.orm import Session

from product_service.exceptions import InvalidRequestError, NotFoundError
from product_service.models import Category, Product
from product_service.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, db: Session):
        self.db = db

    def get_all_categories(self) -> List[Category]:
        """Obtener todas las categorías"""
        return self.db.query(Category).order_by(Category.name).all()

    def get_category(self, category_id: int) -> Category:
        category = self.db.query(Category).filter(Category.category_id == category_id).first()
        if not category:
            raise NotFoundError(f"Category with ID {category_id} not found")
        return category

    def create_category(self, category_data: CategoryCreate) -> Category:
        category = Category(**category_data.model_dump())
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        logger.info(f"[PRODUCTS] Created category {category.category_id}: {category.name}")
        return category

    def update_category(self, category_id: int, category_data: CategoryUpdate) -> Category:
        if category_data.category_id is not None and category_data.category_id != category_id:
            raise InvalidRequestError("Category ID mismatch")

        category = self.get_category(category_id)
        category.name = category_data.name
        category.description = category_data.description
        self.db.commit()
        self.db.refresh(category)
        return category

    def delete_category(self, category_id: int):
        """Eliminar una categoría sin productos asociados"""
        category = self.get_category(category_id)

        in_use = self.db.query(Product).filter(Product.category_id == category_id).count()
        if in_use:
            raise InvalidRequestError(
                "Category has associated products",
                f"{in_use} product(s) reference category {category_id}",
            )

        self.db.delete(category)
        self.db.commit()
        logger.info(f"[PRODUCTS] Deleted category {category_id}")
