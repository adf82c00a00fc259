# storage_api/models/warehouse.py
from sqlalchemy import CheckConstraint, Column, Integer, String

from storage_api.database import Base


# Persistence model for warehouses.
class WarehouseTable(Base):
    __tablename__ = "warehouses"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False)
    address = Column(String(255), nullable=False, default="")
    telephone = Column(String(64), nullable=False, default="")
    capacity = Column(Integer, CheckConstraint("capacity >= 0"), nullable=False, default=0)
