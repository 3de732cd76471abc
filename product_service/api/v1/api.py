from fastapi import APIRouter

from product_service.api.v1 import categories, products

api_router = APIRouter()
api_router.include_router(products.router, tags=["products"])
api_router.include_router(categories.router, tags=["categories"])
