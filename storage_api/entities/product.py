"""Product entity."""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Product:
    """A product record as handed between handlers and stores."""

    name: str = ""
    quantity: int = 0
    code_value: str = ""
    is_published: bool = False
    expiration: Optional[date] = None
    price: float = 0.0
    warehouse_id: Optional[int] = None
    id: Optional[int] = None  # Assigned by the store on creation
