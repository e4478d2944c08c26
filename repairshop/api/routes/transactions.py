"""Repair transactions: list and create for any signed-in user, bulk clear for admins."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from repairshop.api.routes.auth import get_current_user, require_admin
from repairshop.core.database import get_db
from repairshop.schemas.auth import PublicUser
from repairshop.schemas.transaction import (
    MessageResponse,
    TransactionCreate,
    TransactionListResponse,
    TransactionOut,
    TransactionResponse,
)
from repairshop.services import shop

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=TransactionListResponse)
def get_transactions(
    _user: Annotated[PublicUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> TransactionListResponse:
    """All transactions, newest first, each with its part expenditures."""
    transactions = shop.list_transactions(db)
    return TransactionListResponse(
        data=[TransactionOut.model_validate(t) for t in transactions]
    )


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
def post_transaction(
    body: TransactionCreate,
    user: Annotated[PublicUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> TransactionResponse:
    transaction = shop.create_transaction(db, body)
    logger.info("Transaction id=%s created by %s", transaction.id, user.username)
    return TransactionResponse(
        data=TransactionOut.model_validate(transaction),
        message="Transaction created successfully",
    )


@router.delete("", response_model=MessageResponse)
def delete_transactions(
    admin: Annotated[PublicUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Delete every transaction and expenditure (admin only)."""
    deleted = shop.clear_transactions(db)
    logger.info("Transactions cleared by %s: %s removed", admin.username, deleted)
    return MessageResponse(message="All transactions cleared")
