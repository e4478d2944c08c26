"""Pydantic request/response schemas."""

from repairshop.schemas.auth import (
    AuthResponse,
    LoginRequest,
    PublicUser,
    RegisterRequest,
    UsersListResponse,
)
from repairshop.schemas.health import HealthResponse
from repairshop.schemas.supplier import (
    SupplierCreate,
    SupplierOut,
    SupplierPaymentCreate,
    SupplierPaymentOut,
)
from repairshop.schemas.transaction import (
    ExpenditureIn,
    ExpenditureOut,
    TransactionCreate,
    TransactionOut,
)

__all__ = [
    "AuthResponse",
    "ExpenditureIn",
    "ExpenditureOut",
    "HealthResponse",
    "LoginRequest",
    "PublicUser",
    "RegisterRequest",
    "SupplierCreate",
    "SupplierOut",
    "SupplierPaymentCreate",
    "SupplierPaymentOut",
    "TransactionCreate",
    "TransactionOut",
    "UsersListResponse",
]
