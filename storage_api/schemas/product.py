# storage_api/schemas/product.py
from datetime import date
from typing import List, Optional

from pydantic import Field

from storage_api.schemas.common import Envelope, ORMBase
from storage_api.storage.base import INT64_MAX, INT64_MIN


# Schema for creating a new product
class ProductCreate(ORMBase):
    name: str
    quantity: int = Field(default=0, ge=0, le=INT64_MAX)
    code_value: str
    is_published: bool = False
    expiration: Optional[date] = None
    price: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    warehouse_id: Optional[int] = Field(default=None, ge=INT64_MIN, le=INT64_MAX)


# Schema for PATCH / PUT requests - only the fields sent are applied
class ProductUpdate(ORMBase):
    name: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0, le=INT64_MAX)
    code_value: Optional[str] = None
    is_published: Optional[bool] = None
    expiration: Optional[date] = None
    price: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    warehouse_id: Optional[int] = Field(default=None, ge=INT64_MIN, le=INT64_MAX)


# Full product representation including ID
class ProductOut(ORMBase):
    id: int
    name: str
    quantity: int
    code_value: str
    is_published: bool
    expiration: Optional[date] = None
    price: float
    warehouse_id: Optional[int] = None


class ProductEnvelope(Envelope):
    data: Optional[ProductOut] = None


class ProductListEnvelope(Envelope):
    data: List[ProductOut] = []
