# storage_api/storage/warehouse_sql.py
"""SQLAlchemy implementation of WarehouseStore."""
import logging
import re
from typing import Any, Mapping, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storage_api.entities import ReportRow, Warehouse
from storage_api.errors import FilterInvalidError, NotFoundError
from storage_api.models.product import ProductTable
from storage_api.models.warehouse import WarehouseTable
from storage_api.storage.base import WarehouseStore, fits_int64
from storage_api.storage.sql_errors import translate_error

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _to_entity(row: WarehouseTable) -> Warehouse:
    warehouse = Warehouse()
    if row.id is not None:
        warehouse.id = row.id
    if row.name is not None:
        warehouse.name = row.name
    if row.address is not None:
        warehouse.address = row.address
    if row.telephone is not None:
        warehouse.telephone = row.telephone
    if row.capacity is not None:
        warehouse.capacity = row.capacity
    return warehouse


def parse_id_filter(filters: Optional[Mapping[str, Any]]) -> Optional[int]:
    """Extracts the warehouse id restriction from a report filter.

    Accepts an int or a string holding a base-10 integer. Returns None
    when the filter has no "id" key.
    """
    if not filters or "id" not in filters:
        return None

    raw = filters["id"]
    # bool is an int subclass but never a valid id
    if isinstance(raw, bool):
        raise FilterInvalidError("filter id must be an integer")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and _INT_RE.fullmatch(raw.strip()):
        value = int(raw.strip())
    else:
        raise FilterInvalidError("filter id must be an integer")

    if not fits_int64(value):
        raise FilterInvalidError("filter id out of range")
    return value


class WarehouseSQLRepository(WarehouseStore):
    """Reads and writes the warehouses table through a request-scoped session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_one(self, warehouse_id: int) -> Warehouse:
        if not fits_int64(warehouse_id):
            raise NotFoundError("warehouse not found")
        try:
            row = self.db.query(WarehouseTable).filter(WarehouseTable.id == warehouse_id).first()
        except SQLAlchemyError as e:
            raise translate_error(e, "read", "warehouse") from e

        if row is None:
            raise NotFoundError("warehouse not found")
        return _to_entity(row)

    def get_all(self) -> list[Warehouse]:
        try:
            rows = self.db.query(WarehouseTable).order_by(WarehouseTable.id.asc()).all()
        except SQLAlchemyError as e:
            raise translate_error(e, "list", "warehouses") from e

        return [_to_entity(r) for r in rows]

    def create(self, warehouse: Warehouse) -> None:
        row = WarehouseTable(
            name=warehouse.name,
            address=warehouse.address,
            telephone=warehouse.telephone,
            capacity=warehouse.capacity,
        )
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise translate_error(e, "create", "warehouse") from e

        warehouse.id = row.id
        logger.debug("Created warehouse id=%s name=%s", warehouse.id, warehouse.name)

    def report_products(self, filters: Optional[Mapping[str, Any]] = None) -> list[ReportRow]:
        # Validate before touching the database
        warehouse_id = parse_id_filter(filters)

        q = self.db.query(
            WarehouseTable.name.label("warehouse_name"),
            func.count(ProductTable.id).label("products_count"),
        ).outerjoin(ProductTable, ProductTable.warehouse_id == WarehouseTable.id)

        if warehouse_id is not None:
            q = q.filter(WarehouseTable.id == warehouse_id)

        q = q.group_by(WarehouseTable.id, WarehouseTable.name).order_by(WarehouseTable.id.asc())

        try:
            rows = q.all()
        except SQLAlchemyError as e:
            raise translate_error(e, "report", "warehouse products") from e

        return [
            ReportRow(
                warehouse_name=r.warehouse_name if r.warehouse_name is not None else "",
                products_count=int(r.products_count or 0),
            )
            for r in rows
        ]
