"""Suppliers and supplier payments. Bulk clear is admin only."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from repairshop.api.routes.auth import get_current_user, require_admin
from repairshop.core.database import get_db
from repairshop.schemas.auth import PublicUser
from repairshop.schemas.supplier import (
    SupplierCreate,
    SupplierListResponse,
    SupplierPaymentCreate,
    SupplierPaymentListResponse,
    SupplierPaymentOut,
    SupplierPaymentResponse,
    SupplierResponse,
)
from repairshop.schemas.transaction import MessageResponse
from repairshop.services import shop

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=SupplierListResponse)
def get_suppliers(
    _user: Annotated[PublicUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> SupplierListResponse:
    """Suppliers with total expenditure, total payments and due amount."""
    return SupplierListResponse(data=shop.list_suppliers(db))


@router.post("", response_model=SupplierResponse, status_code=status.HTTP_201_CREATED)
def post_supplier(
    body: SupplierCreate,
    _user: Annotated[PublicUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> SupplierResponse:
    supplier = shop.create_supplier(db, body)
    return SupplierResponse(data=supplier, message="Supplier created successfully")


@router.post(
    "/{supplier_id}/payments",
    response_model=SupplierPaymentResponse,
    status_code=status.HTTP_201_CREATED,
)
def post_supplier_payment(
    supplier_id: int,
    body: SupplierPaymentCreate,
    _user: Annotated[PublicUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> SupplierPaymentResponse:
    payment = shop.record_supplier_payment(db, supplier_id, body)
    return SupplierPaymentResponse(
        data=SupplierPaymentOut.model_validate(payment),
        message="Payment recorded successfully",
    )


@router.get("/payments", response_model=SupplierPaymentListResponse)
def get_supplier_payments(
    _user: Annotated[PublicUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> SupplierPaymentListResponse:
    """Payments to all suppliers, newest first."""
    payments = shop.list_supplier_payments(db)
    return SupplierPaymentListResponse(
        data=[SupplierPaymentOut.model_validate(p) for p in payments]
    )


@router.delete("/payments", response_model=MessageResponse)
def delete_supplier_payments(
    admin: Annotated[PublicUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Delete every supplier payment (admin only); suppliers are kept."""
    deleted = shop.clear_supplier_payments(db)
    logger.info("Supplier payments cleared by %s: %s removed", admin.username, deleted)
    return MessageResponse(message="All supplier payments cleared")


@router.delete("", response_model=MessageResponse)
def delete_suppliers(
    admin: Annotated[PublicUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Delete every supplier and supplier payment (admin only)."""
    deleted = shop.clear_suppliers(db)
    logger.info("Suppliers cleared by %s: %s removed", admin.username, deleted)
    return MessageResponse(message="All suppliers cleared")
