"""Warehouse entity and the products-per-warehouse report row."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Warehouse:
    name: str = ""
    address: str = ""
    telephone: str = ""
    capacity: int = 0
    id: Optional[int] = None  # Assigned by the store on creation


@dataclass
class ReportRow:
    """Amount of products stored in one warehouse. Computed, never persisted."""

    warehouse_name: str = ""
    products_count: int = 0
