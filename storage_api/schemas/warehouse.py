# storage_api/schemas/warehouse.py
from typing import List, Optional

from pydantic import Field

from storage_api.schemas.common import Envelope, ORMBase
from storage_api.storage.base import INT64_MAX


# Schema for creating a new warehouse
class WarehouseCreate(ORMBase):
    name: str
    address: str = ""
    telephone: str = ""
    capacity: int = Field(default=0, ge=0, le=INT64_MAX)


class WarehouseOut(ORMBase):
    id: int
    name: str
    address: str
    telephone: str
    capacity: int


# Products-per-warehouse report line
class ReportRowOut(ORMBase):
    warehouse_name: str
    products_count: int


class WarehouseEnvelope(Envelope):
    data: Optional[WarehouseOut] = None


class WarehouseListEnvelope(Envelope):
    data: List[WarehouseOut] = []


class ReportEnvelope(Envelope):
    data: List[ReportRowOut] = []
