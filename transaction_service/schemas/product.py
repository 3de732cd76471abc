from .base import CamelModel


class ProductSnapshot(CamelModel):
    """Vista mínima de un producto leída del product service"""

    product_id: int
    name: str
    stock: int
