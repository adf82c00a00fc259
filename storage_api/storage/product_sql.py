# storage_api/storage/product_sql.py
"""SQLAlchemy implementation of ProductStore."""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storage_api.entities import Product
from storage_api.errors import NotFoundError
from storage_api.models.product import ProductTable
from storage_api.storage.base import ProductStore, fits_int64
from storage_api.storage.sql_errors import translate_error

logger = logging.getLogger(__name__)


def _to_entity(row: ProductTable) -> Product:
    # NULL columns keep the entity's zero value
    product = Product()
    if row.id is not None:
        product.id = row.id
    if row.name is not None:
        product.name = row.name
    if row.quantity is not None:
        product.quantity = row.quantity
    if row.code_value is not None:
        product.code_value = row.code_value
    if row.is_published is not None:
        product.is_published = bool(row.is_published)
    if row.expiration is not None:
        product.expiration = row.expiration
    if row.price is not None:
        product.price = float(row.price)
    if row.warehouse_id is not None:
        product.warehouse_id = row.warehouse_id
    return product


def _to_columns(product: Product) -> dict:
    return {
        "name": product.name,
        "quantity": product.quantity,
        "code_value": product.code_value,
        "is_published": product.is_published,
        "expiration": product.expiration,
        "price": product.price,
        "warehouse_id": product.warehouse_id,
    }


class ProductSQLRepository(ProductStore):
    """Reads and writes the products table through a request-scoped session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_one(self, product_id: int) -> Product:
        if not fits_int64(product_id):
            raise NotFoundError("product not found")
        try:
            row = self.db.query(ProductTable).filter(ProductTable.id == product_id).first()
        except SQLAlchemyError as e:
            raise translate_error(e, "read", "product") from e

        if row is None:
            raise NotFoundError("product not found")
        return _to_entity(row)

    def get_all(self) -> list[Product]:
        try:
            rows = self.db.query(ProductTable).order_by(ProductTable.id.asc()).all()
        except SQLAlchemyError as e:
            raise translate_error(e, "list", "products") from e

        return [_to_entity(r) for r in rows]

    def store(self, product: Product) -> None:
        row = ProductTable(**_to_columns(product))
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise translate_error(e, "store", "product") from e

        product.id = row.id
        logger.debug("Stored product id=%s code_value=%s", product.id, product.code_value)

    def update(self, product: Product) -> None:
        if product.id is None or not fits_int64(product.id):
            raise NotFoundError("product not found")
        try:
            affected = (
                self.db.query(ProductTable)
                .filter(ProductTable.id == product.id)
                .update(_to_columns(product), synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise translate_error(e, "update", "product") from e

        # Zero rows means no product carries that id
        if affected != 1:
            raise NotFoundError("product not found")
        logger.debug("Updated product id=%s", product.id)

    def delete(self, product_id: int) -> None:
        if not fits_int64(product_id):
            raise NotFoundError("product not found")
        try:
            affected = (
                self.db.query(ProductTable)
                .filter(ProductTable.id == product_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise translate_error(e, "delete", "product") from e

        if affected != 1:
            raise NotFoundError("product not found")
        logger.debug("Deleted product id=%s", product_id)
