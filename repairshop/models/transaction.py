"""ORM models for repair transactions and the parts bought for them."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from repairshop.models.base import Base


class Transaction(Base):
    """One repair job taken in at the counter."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_name = Column(String(255), nullable=False)
    mobile_number = Column(String(32), nullable=False)
    device_model = Column(String(255), nullable=False)
    repair_type = Column(String(255), nullable=False)
    repair_cost = Column(Float, nullable=False)
    payment_method = Column(String(32), nullable=False, default="cash")
    amount_given = Column(Float, nullable=True)
    change_returned = Column(Float, nullable=True)
    status = Column(String(32), nullable=False, default="pending")
    remarks = Column(Text, nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )

    expenditures = relationship(
        "Expenditure",
        back_populates="transaction",
        cascade="all, delete-orphan",
        order_by="Expenditure.id",
    )


class Expenditure(Base):
    """A part purchase charged against a transaction; store names the supplier."""

    __tablename__ = "expenditures"

    id = Column(Integer, primary_key=True, autoincrement=True)
    transaction_id = Column(
        Integer,
        ForeignKey("transactions.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    item = Column(String(255), nullable=False)
    cost = Column(Float, nullable=False)
    store = Column(String(255), nullable=False, default="", index=True)
    custom_store = Column(String(255), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    transaction = relationship("Transaction", back_populates="expenditures")
