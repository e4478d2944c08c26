"""Schemas for suppliers, their payments and outstanding dues."""

from datetime import datetime

from pydantic import Field

from repairshop.schemas.base import CamelModel


class SupplierCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    contact_person: str = Field(..., min_length=1, max_length=255)
    address: str | None = None
    email: str = Field(default="", max_length=255)


class SupplierOut(CamelModel):
    """Supplier with totals: due = parts bought from it minus payments made."""

    id: int
    name: str
    contact_person: str
    address: str | None = None
    email: str
    created_at: datetime | None = None
    total_expenditure: float = 0.0
    total_payments: float = 0.0
    due_amount: float = 0.0


class SupplierPaymentCreate(CamelModel):
    amount: float = Field(..., gt=0)
    payment_method: str = Field(default="cash", max_length=32)
    description: str | None = None


class SupplierPaymentOut(SupplierPaymentCreate):
    id: int
    supplier_id: int
    created_at: datetime | None = None


class SupplierListResponse(CamelModel):
    data: list[SupplierOut]


class SupplierResponse(CamelModel):
    data: SupplierOut
    message: str


class SupplierPaymentResponse(CamelModel):
    data: SupplierPaymentOut
    message: str


class SupplierPaymentListResponse(CamelModel):
    data: list[SupplierPaymentOut]
