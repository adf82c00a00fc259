from storage_api.entities.product import Product
from storage_api.entities.warehouse import ReportRow, Warehouse

__all__ = ["Product", "ReportRow", "Warehouse"]
