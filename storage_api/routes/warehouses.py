# storage_api/routes/warehouses.py
import logging

from fastapi import APIRouter, Depends, Path, Request, status

from storage_api.deps import get_warehouse_store
from storage_api.entities import Warehouse
from storage_api.schemas import warehouse as warehouse_schemas
from storage_api.storage import WarehouseStore
from storage_api.storage.base import INT64_MAX, INT64_MIN
from storage_api.utils.responses import envelope

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/warehouses", tags=["Warehouses"])


# Registered before /{warehouse_id} so the literal segment is not parsed as an id
@router.get("/reportProducts", response_model=warehouse_schemas.ReportEnvelope)
def report_products(request: Request, store: WarehouseStore = Depends(get_warehouse_store)):
    """Product count per warehouse; ?id= limits the report to one warehouse."""
    filters = dict(request.query_params)
    rows = store.report_products(filters)

    data = [warehouse_schemas.ReportRowOut.model_validate(r) for r in rows]
    return envelope("warehouses report of products found", data)


@router.get("", response_model=warehouse_schemas.WarehouseListEnvelope)
def list_warehouses(store: WarehouseStore = Depends(get_warehouse_store)):
    warehouses = store.get_all()
    return envelope("warehouses found", [warehouse_schemas.WarehouseOut.model_validate(w) for w in warehouses])


@router.get("/{warehouse_id}", response_model=warehouse_schemas.WarehouseEnvelope)
def get_warehouse(
    warehouse_id: int = Path(..., ge=INT64_MIN, le=INT64_MAX),
    store: WarehouseStore = Depends(get_warehouse_store),
):
    warehouse = store.get_one(warehouse_id)
    return envelope("warehouse found", warehouse_schemas.WarehouseOut.model_validate(warehouse))


@router.post("", response_model=warehouse_schemas.WarehouseEnvelope, status_code=status.HTTP_201_CREATED)
def create_warehouse(
    payload: warehouse_schemas.WarehouseCreate,
    store: WarehouseStore = Depends(get_warehouse_store),
):
    warehouse = Warehouse(**payload.model_dump())
    store.create(warehouse)

    logger.info("Warehouse created id=%s name=%s", warehouse.id, warehouse.name)
    return envelope("warehouse created", warehouse_schemas.WarehouseOut.model_validate(warehouse))
