"""SQLAlchemy ORM models."""

from repairshop.models.base import Base
from repairshop.models.supplier import Supplier, SupplierPayment
from repairshop.models.transaction import Expenditure, Transaction
from repairshop.models.user import User

__all__ = ["Base", "Expenditure", "Supplier", "SupplierPayment", "Transaction", "User"]
