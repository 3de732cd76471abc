import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from transaction_service.api.v1.api import api_router
from transaction_service.core.config import settings
from transaction_service.core.errors import register_error_handlers
from transaction_service.core.logging import setup_logging
from transaction_service.db import SessionLocal, create_tables, seed_transaction_types

setup_logging()
logger = logging.getLogger(__name__)


# Crear las tablas y los tipos por defecto al iniciar la aplicación
@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    db = SessionLocal()
    try:
        seed_transaction_types(db)
    finally:
        db.close()
    logger.info(
        f"[TRANSACTIONS] {settings.project_name} ready on port {settings.app_port}, "
        f"product service at {settings.product_service_base_url}"
    )
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


@app.get("/")
def read_root():
    return {"message": "Transaction Service API"}


@app.get("/health")
def health():
    return {"status": "healthy", "service": "transaction-service"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.app_port)
