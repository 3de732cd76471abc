from typing import Annotated

from fastapi import Path

from product_service.core.config import settings
from product_service.schemas.base import MAX_INT
from product_service.services.image_storage import ImageStorage

# Id en la ruta, acotado al rango de la columna
IdPath = Annotated[int, Path(le=MAX_INT)]


def get_image_storage() -> ImageStorage:
    return ImageStorage(settings.static_dir)
