import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from product_service.api.v1.api import api_router
from product_service.core.config import settings
from product_service.core.errors import register_error_handlers
from product_service.core.logging import setup_logging
from product_service.db import create_tables

setup_logging()
logger = logging.getLogger(__name__)


# Crear las tablas al iniciar la aplicación
@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    logger.info(f"[PRODUCTS] {settings.project_name} ready on port {settings.app_port}")
    yield


app = FastAPI(title=settings.project_name, lifespan=lifespan)
register_error_handlers(app)

# CORS por fuera del manejo de errores
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.api_prefix)

# Imágenes subidas: /images/products/<archivo>
app.mount(
    "/images",
    StaticFiles(directory=str(Path(settings.static_dir) / "images"), check_dir=False),
    name="images",
)


@app.get("/")
def read_root():
    return {"message": "Product Service API"}


@app.get("/health")
def health():
    return {"status": "healthy", "service": "product-service"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.app_port)
