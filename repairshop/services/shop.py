"""Shop bookkeeping: repair transactions, part expenditures and supplier dues."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from repairshop.core.errors import ConflictError, NotFoundError
from repairshop.models import Expenditure, Supplier, SupplierPayment, Transaction
from repairshop.schemas.supplier import (
    SupplierCreate,
    SupplierOut,
    SupplierPaymentCreate,
)
from repairshop.schemas.transaction import TransactionCreate

logger = logging.getLogger(__name__)


def list_transactions(session: Session) -> list[Transaction]:
    """All transactions, newest first, with their expenditures loaded."""
    return (
        session.query(Transaction)
        .options(selectinload(Transaction.expenditures))
        .order_by(Transaction.created_at.desc(), Transaction.id.desc())
        .all()
    )


def create_transaction(session: Session, body: TransactionCreate) -> Transaction:
    """Insert a transaction and one expenditure per entry of parts_cost, atomically."""
    transaction = Transaction(
        customer_name=body.customer_name,
        mobile_number=body.mobile_number,
        device_model=body.device_model,
        repair_type=body.repair_type,
        repair_cost=body.repair_cost,
        payment_method=body.payment_method,
        amount_given=body.amount_given,
        change_returned=body.change_returned,
        status=body.status,
        remarks=body.remarks,
    )
    for part in body.parts_cost:
        transaction.expenditures.append(
            Expenditure(
                item=part.item,
                cost=part.cost,
                store=part.store,
                custom_store=part.custom_store,
            )
        )
    session.add(transaction)
    session.commit()
    session.refresh(transaction)
    return transaction


def clear_transactions(session: Session) -> int:
    """Delete every expenditure and transaction. Returns the number of transactions removed."""
    session.query(Expenditure).delete(synchronize_session=False)
    deleted = session.query(Transaction).delete(synchronize_session=False)
    session.commit()
    return deleted


def _supplier_totals(session: Session) -> tuple[dict[str, float], dict[int, float]]:
    spent = dict(
        session.query(Expenditure.store, func.coalesce(func.sum(Expenditure.cost), 0.0))
        .group_by(Expenditure.store)
        .all()
    )
    paid = dict(
        session.query(
            SupplierPayment.supplier_id,
            func.coalesce(func.sum(SupplierPayment.amount), 0.0),
        )
        .group_by(SupplierPayment.supplier_id)
        .all()
    )
    return spent, paid


def _supplier_out(supplier: Supplier, spent: dict[str, float], paid: dict[int, float]) -> SupplierOut:
    total_expenditure = float(spent.get(supplier.name, 0.0))
    total_payments = float(paid.get(supplier.id, 0.0))
    return SupplierOut(
        id=supplier.id,
        name=supplier.name,
        contact_person=supplier.contact,
        address=supplier.address,
        email=supplier.email,
        created_at=supplier.created_at,
        total_expenditure=total_expenditure,
        total_payments=total_payments,
        due_amount=total_expenditure - total_payments,
    )


def list_suppliers(session: Session) -> list[SupplierOut]:
    """
    Suppliers ordered by name with their running totals.

    Expenditures are matched to suppliers by store name; due amount is what
    was bought from the supplier minus what has been paid to it.
    """
    spent, paid = _supplier_totals(session)
    suppliers = session.query(Supplier).order_by(Supplier.name).all()
    return [_supplier_out(s, spent, paid) for s in suppliers]


def _find_supplier_by_name(session: Session, name: str) -> Supplier | None:
    return session.query(Supplier).filter(Supplier.name == name).first()


def create_supplier(session: Session, body: SupplierCreate) -> SupplierOut:
    """Insert a supplier; names are unique."""
    if _find_supplier_by_name(session, body.name) is not None:
        raise ConflictError("Supplier already exists")
    supplier = Supplier(
        name=body.name,
        contact=body.contact_person,
        address=body.address,
        email=body.email,
    )
    session.add(supplier)
    try:
        session.commit()
    except IntegrityError as e:
        # A concurrent insert won the unique name index.
        session.rollback()
        raise ConflictError("Supplier already exists") from e
    session.refresh(supplier)
    spent, paid = _supplier_totals(session)
    return _supplier_out(supplier, spent, paid)


def record_supplier_payment(
    session: Session, supplier_id: int, body: SupplierPaymentCreate
) -> SupplierPayment:
    supplier = session.get(Supplier, supplier_id)
    if supplier is None:
        raise NotFoundError("Supplier not found")
    payment = SupplierPayment(
        supplier_id=supplier.id,
        amount=body.amount,
        payment_method=body.payment_method,
        description=body.description,
    )
    session.add(payment)
    session.commit()
    session.refresh(payment)
    logger.info("Payment of %s recorded for supplier id=%s", payment.amount, supplier.id)
    return payment


def list_supplier_payments(session: Session) -> list[SupplierPayment]:
    """All payments across suppliers, newest first."""
    return (
        session.query(SupplierPayment)
        .order_by(SupplierPayment.created_at.desc(), SupplierPayment.id.desc())
        .all()
    )


def clear_supplier_payments(session: Session) -> int:
    """Delete every supplier payment, keeping the suppliers. Returns the number removed."""
    deleted = session.query(SupplierPayment).delete(synchronize_session=False)
    session.commit()
    return deleted


def clear_suppliers(session: Session) -> int:
    """Delete every supplier payment and supplier. Returns the number of suppliers removed."""
    session.query(SupplierPayment).delete(synchronize_session=False)
    deleted = session.query(Supplier).delete(synchronize_session=False)
    session.commit()
    return deleted
