"""Schemas for repair transactions and their part expenditures."""

from datetime import datetime

from pydantic import Field

from repairshop.schemas.base import CamelModel


class ExpenditureIn(CamelModel):
    item: str = Field(..., min_length=1, max_length=255)
    cost: float = Field(..., ge=0)
    store: str = Field(default="", max_length=255)
    custom_store: str | None = Field(default=None, max_length=255)


class ExpenditureOut(ExpenditureIn):
    id: int
    created_at: datetime | None = None


class TransactionCreate(CamelModel):
    """Body of POST /transactions; partsCost lists parts bought for the repair."""

    customer_name: str = Field(..., min_length=1, max_length=255)
    mobile_number: str = Field(..., min_length=1, max_length=32)
    device_model: str = Field(..., min_length=1, max_length=255)
    repair_type: str = Field(..., min_length=1, max_length=255)
    repair_cost: float = Field(..., gt=0)
    payment_method: str = Field(default="cash", max_length=32)
    amount_given: float | None = Field(default=None, ge=0)
    change_returned: float | None = Field(default=None, ge=0)
    status: str = Field(default="pending", max_length=32)
    remarks: str | None = None
    parts_cost: list[ExpenditureIn] = Field(default_factory=list)


class TransactionOut(CamelModel):
    id: int
    customer_name: str
    mobile_number: str
    device_model: str
    repair_type: str
    repair_cost: float
    payment_method: str
    amount_given: float | None = None
    change_returned: float | None = None
    status: str
    remarks: str | None = None
    created_at: datetime | None = None
    expenditures: list[ExpenditureOut] = Field(default_factory=list)


class TransactionListResponse(CamelModel):
    data: list[TransactionOut]


class TransactionResponse(CamelModel):
    data: TransactionOut
    message: str


class MessageResponse(CamelModel):
    message: str
