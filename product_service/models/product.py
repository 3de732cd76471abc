from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from product_service.db import Base

NO_CATEGORY_LABEL = "No category"


class Product(Base):
    __tablename__ = "products"

    product_id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    description = Column(String(1000))
    category_id = Column(Integer, ForeignKey("categories.category_id"), nullable=False)
    image_url = Column(String(500))
    price = Column(Numeric(18, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    # Relación con Category
    category = relationship("Category", back_populates="products", lazy="joined")

    @property
    def category_name(self) -> str:
        return self.category.name if self.category is not None else NO_CATEGORY_LABEL

    def __repr__(self):
        return f"<Product(product_id={self.product_id}, name='{self.name}')>"
