# storage_api/deps.py
from fastapi import Depends
from sqlalchemy.orm import Session

from storage_api.database import get_db
from storage_api.storage import (
    ProductSQLRepository,
    ProductStore,
    WarehouseSQLRepository,
    WarehouseStore,
)


def get_product_store(db: Session = Depends(get_db)) -> ProductStore:
    return ProductSQLRepository(db)


def get_warehouse_store(db: Session = Depends(get_db)) -> WarehouseStore:
    return WarehouseSQLRepository(db)
