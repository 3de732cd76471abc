import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy.orm import Session

from product_service.exceptions import InvalidRequestError, NotFoundError
from product_service.models import Category, Product
from product_service.schemas.product import ProductCreate, ProductUpdate
from product_service.services.image_storage import ImageStorage

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProductService:
    def __init__(self, db: Session):
        self.db = db

    def get_all_products(self) -> List[Product]:
        """Obtener todos los productos con su categoría"""
        products = self.db.query(Product).order_by(Product.product_id).all()
        logger.info(f"[PRODUCTS] Found {len(products)} products")

        for product in products:
            if product.category is None:
                logger.warning(
                    f"[PRODUCTS] Product without category: id={product.product_id}, "
                    f"name={product.name}, category_id={product.category_id}"
                )
        return products

    def get_product(self, product_id: int) -> Product:
        product = self.db.query(Product).filter(Product.product_id == product_id).first()
        if not product:
            raise NotFoundError(f"Product with ID {product_id} not found")
        return product

    def _ensure_category(self, category_id: int):
        exists = self.db.query(Category).filter(Category.category_id == category_id).first()
        if not exists:
            raise InvalidRequestError(f"Category with ID {category_id} does not exist")

    def create_product(self, product_data: ProductCreate) -> Product:
        """Crear un producto; las fechas las pone el servicio"""
        self._ensure_category(product_data.category_id)

        now = utcnow()
        product = Product(**product_data.model_dump(), created_at=now, updated_at=now)
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)

        logger.info(f"[PRODUCTS] Created product {product.product_id}: {product.name}")
        return product

    def update_product(self, product_id: int, product_data: ProductUpdate) -> Product:
        """Actualización completa de un producto"""
        if product_data.product_id is not None and product_data.product_id != product_id:
            raise InvalidRequestError("Product ID mismatch")

        product = self.get_product(product_id)
        self._ensure_category(product_data.category_id)

        update_data = product_data.model_dump(exclude={"product_id"})
        for field, value in update_data.items():
            setattr(product, field, value)
        product.updated_at = utcnow()

        self.db.commit()
        self.db.refresh(product)
        return product

    def set_stock(self, product_id: int, stock: int) -> Product:
        """Sobrescribir el stock con un valor absoluto.

        No hace aritmética ni valida el valor: el llamador (transaction
        service) ya calculó el nuevo stock.
        """
        product = self.get_product(product_id)

        old_stock = product.stock
        product.stock = stock
        product.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(product)

        logger.info(f"[PRODUCTS] Stock updated for product {product_id}: {old_stock} -> {stock}")
        return product

    def delete_product(self, product_id: int):
        product = self.get_product(product_id)
        self.db.delete(product)
        self.db.commit()
        logger.info(f"[PRODUCTS] Deleted product {product_id}")

    def update_image(self, product_id: int, filename: str, content: bytes, storage: ImageStorage) -> Product:
        """Guardar una nueva imagen y descartar la anterior (best-effort)"""
        product = self.get_product(product_id)
        if not content:
            raise InvalidRequestError("No image was provided")

        previous_url = product.image_url
        new_url = storage.save(filename, content)
        product.image_url = new_url
        product.updated_at = utcnow()
        try:
            self.db.commit()
        except Exception:
            # Sin producto que la referencie, la imagen nueva sobra
            self.db.rollback()
            storage.discard(new_url)
            raise
        self.db.refresh(product)

        storage.discard(previous_url)
        logger.info(f"[PRODUCTS] Image updated for product {product_id}: {product.image_url}")
        return product
