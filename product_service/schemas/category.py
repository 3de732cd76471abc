from pydantic import Field
from typing import Optional

from .base import MAX_INT, CamelModel


class CategoryBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(CategoryBase):
    category_id: Optional[int] = Field(None, le=MAX_INT)


class CategoryResponse(CategoryBase):
    category_id: int
