# storage_api/routes/products.py
import logging

from fastapi import APIRouter, Depends, Path, Response, status

from storage_api.deps import get_product_store
from storage_api.entities import Product
from storage_api.schemas import product as product_schemas
from storage_api.storage import ProductStore
from storage_api.storage.base import INT64_MAX, INT64_MIN
from storage_api.utils.responses import envelope

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])

# Fields a client may explicitly clear with null on update
NULLABLE_FIELDS = {"expiration", "warehouse_id"}


def _serialize(product: Product) -> product_schemas.ProductOut:
    return product_schemas.ProductOut.model_validate(product)


# =========================
# PRODUCT LIST
# =========================
@router.get("", response_model=product_schemas.ProductListEnvelope)
def list_products(store: ProductStore = Depends(get_product_store)):
    products = store.get_all()
    return envelope("products found", [_serialize(p) for p in products])


# =========================
# SINGLE PRODUCT
# =========================
@router.get("/{product_id}", response_model=product_schemas.ProductEnvelope)
def get_product(
    product_id: int = Path(..., ge=INT64_MIN, le=INT64_MAX),
    store: ProductStore = Depends(get_product_store),
):
    product = store.get_one(product_id)
    return envelope("product found", _serialize(product))


# =========================
# CREATE PRODUCT
# =========================
@router.post("", response_model=product_schemas.ProductEnvelope, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: product_schemas.ProductCreate,
    store: ProductStore = Depends(get_product_store),
):
    product = Product(**payload.model_dump())
    store.store(product)

    logger.info("Product created id=%s code_value=%s", product.id, product.code_value)
    return envelope("product created", _serialize(product))


# =========================
# UPDATE PRODUCT (PATCH / PUT - partial)
# =========================
@router.patch("/{product_id}", response_model=product_schemas.ProductEnvelope)
@router.put("/{product_id}", response_model=product_schemas.ProductEnvelope)
def update_product(
    payload: product_schemas.ProductUpdate,
    product_id: int = Path(..., ge=INT64_MIN, le=INT64_MAX),
    store: ProductStore = Depends(get_product_store),
):
    # Read-modify-write: only fields present in the body replace stored values
    product = store.get_one(product_id)

    for key, value in payload.model_dump(exclude_unset=True).items():
        if value is None and key not in NULLABLE_FIELDS:
            continue
        setattr(product, key, value)

    store.update(product)

    logger.info("Product updated id=%s", product.id)
    return envelope("product updated", _serialize(product))


# =========================
# DELETE PRODUCT
# =========================
@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_product(
    product_id: int = Path(..., ge=INT64_MIN, le=INT64_MAX),
    store: ProductStore = Depends(get_product_store),
):
    store.delete(product_id)

    logger.info("Product deleted id=%s", product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
