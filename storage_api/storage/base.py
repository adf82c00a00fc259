# storage_api/storage/base.py
"""Store interfaces the request handlers depend on."""
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from storage_api.entities import Product, ReportRow, Warehouse

# Ids and counters live in signed 64-bit integer columns
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


class ProductStore(ABC):

    @abstractmethod
    def get_one(self, product_id: int) -> Product:
        """Returns the product with the given id. Raises NotFoundError when no row matches."""
        pass

    @abstractmethod
    def get_all(self) -> list[Product]:
        """Returns every product in insertion order."""
        pass

    @abstractmethod
    def store(self, product: Product) -> None:
        """Inserts the product and sets its id. Raises NotUniqueError on a duplicate code_value."""
        pass

    @abstractmethod
    def update(self, product: Product) -> None:
        """Replaces every mutable field of the product identified by product.id."""
        pass

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Deletes the product. Raises NotFoundError when no row matches."""
        pass


class WarehouseStore(ABC):

    @abstractmethod
    def get_one(self, warehouse_id: int) -> Warehouse:
        """Returns the warehouse with the given id. Raises NotFoundError when no row matches."""
        pass

    @abstractmethod
    def get_all(self) -> list[Warehouse]:
        """Returns every warehouse in insertion order."""
        pass

    @abstractmethod
    def create(self, warehouse: Warehouse) -> None:
        """Inserts the warehouse and sets its id. Raises NotUniqueError on a duplicate name."""
        pass

    @abstractmethod
    def report_products(self, filters: Optional[Mapping[str, Any]] = None) -> list[ReportRow]:
        """Counts products per warehouse, optionally restricted by filters["id"]."""
        pass
