from storage_api.models.product import ProductTable
from storage_api.models.warehouse import WarehouseTable

__all__ = ["ProductTable", "WarehouseTable"]
