# storage_api/models/product.py
from sqlalchemy import Boolean, CheckConstraint, Column, Date, Float, ForeignKey, Integer, String

from storage_api.database import Base


# Persistence model for products.
# The repository maps any NULL it reads back to the field's zero value.
class ProductTable(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    quantity = Column(Integer, CheckConstraint("quantity >= 0"), nullable=False, default=0)
    code_value = Column(String(255), unique=True, nullable=False, index=True)
    is_published = Column(Boolean, nullable=False, default=False)
    expiration = Column(Date, nullable=True)
    price = Column(Float, CheckConstraint("price >= 0"), nullable=False, default=0.0)

    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=True, index=True)
