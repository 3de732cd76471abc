import logging
import uuid
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

PRODUCT_IMAGES_URL = "/images/products"


class ImageStorage:
    """Guarda imágenes de productos bajo ``<root>/images/products``.

    Las URLs devueltas son relativas a la raíz pública, p.ej.
    ``/images/products/<uuid>_foto.png``.
    """

    def __init__(self, root):
        self.root = Path(root)

    @property
    def products_dir(self) -> Path:
        return self.root / PRODUCT_IMAGES_URL.strip("/")

    def save(self, filename: str, content: bytes) -> str:
        self.products_dir.mkdir(parents=True, exist_ok=True)

        unique_name = f"{uuid.uuid4()}_{Path(filename or 'image').name}"
        (self.products_dir / unique_name).write_bytes(content)
        return f"{PRODUCT_IMAGES_URL}/{unique_name}"

    def discard(self, image_url: Optional[str]):
        """Eliminar una imagen anterior; los errores se registran y se ignoran"""
        if not image_url or not image_url.startswith(PRODUCT_IMAGES_URL + "/"):
            return

        path = (self.root / image_url.lstrip("/")).resolve()
        if not path.is_relative_to(self.products_dir.resolve()):
            logger.warning(f"[PRODUCTS] Refusing to delete image outside {self.products_dir}: {image_url}")
            return

        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"[PRODUCTS] Could not delete previous image {path}: {e}")
