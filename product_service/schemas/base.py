from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, PlainSerializer
from pydantic.alias_generators import to_camel

# Decimal en memoria, número en JSON
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# Mayor valor que admite una columna INTEGER (int de 32 bits)
MAX_INT = 2_147_483_647


class CamelModel(BaseModel):
    """Modelo base: JSON en camelCase, acepta también snake_case"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
