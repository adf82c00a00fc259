from storage_api.storage.base import ProductStore, WarehouseStore
from storage_api.storage.product_sql import ProductSQLRepository
from storage_api.storage.warehouse_sql import WarehouseSQLRepository

__all__ = ["ProductStore", "WarehouseStore", "ProductSQLRepository", "WarehouseSQLRepository"]
