# foodpos/models/sql_models.py
import enum
from datetime import datetime, timezone

from sqlalchemy import (
    CheckConstraint, Column, DateTime, ForeignKey, Integer, Numeric, String,
)
from sqlalchemy.orm import relationship

from foodpos.core.database import Base

MONEY = Numeric(10, 2)
# Largest value an INTEGER id column holds
MAX_ID = 2**31 - 1


class OrderStatus(str, enum.Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"


class FoodCategory(str, enum.Enum):
    SET = "Set"
    A_LA_CARTE = "A la carte"


def utc_now():
    return datetime.now(timezone.utc)


class Customer(Base):
    __tablename__ = "customers"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    age = Column(Integer)
    phone_number = Column(String(11), unique=True, index=True)
    gender = Column(String(10))
    password_hash = Column(String(64))

    orders = relationship("Order", back_populates="customer")


class MenuItem(Base):
    __tablename__ = "menu_items"
    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_menu_items_stock_non_negative"),
        CheckConstraint("price > 0", name="ck_menu_items_price_positive"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, index=True, nullable=False)
    price = Column(MONEY, nullable=False)
    category = Column(String(20), nullable=False, default=FoodCategory.A_LA_CARTE.value)
    stock = Column(Integer, nullable=False, default=0)


class PaymentMethod(Base):
    __tablename__ = "payment_methods"
    __table_args__ = (
        CheckConstraint("balance >= 0", name="ck_payment_methods_balance_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True)
    payment_type = Column(String(20), nullable=False)  # TNG, Grab, Bank
    wallet_id = Column(String(50), unique=True, index=True, nullable=True)
    card_number = Column(String(16), unique=True, index=True, nullable=True)
    expiry_date = Column(String(4), nullable=True)  # MMYY
    password_hash = Column(String(64), nullable=False)
    balance = Column(MONEY, nullable=False, default=0)


class Order(Base):
    __tablename__ = "orders"
    id = Column(Integer, primary_key=True, index=True)
    order_date = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    payment_method_id = Column(Integer, ForeignKey("payment_methods.id"), nullable=False)
    payment_type = Column(String(20), nullable=False)
    total_price = Column(MONEY, nullable=False)
    status = Column(String(20), nullable=False, default=OrderStatus.PENDING.value)

    customer = relationship("Customer", back_populates="orders")
    payment_method = relationship("PaymentMethod")
    details = relationship(
        "OrderDetail",
        back_populates="order",
        order_by="OrderDetail.id",
        cascade="all, delete-orphan",
    )


class OrderDetail(Base):
    """One confirmed line, snapshotted at order time."""
    __tablename__ = "order_details"
    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    menu_item_id = Column(Integer, ForeignKey("menu_items.id"), nullable=False)
    item_name = Column(String(100), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(MONEY, nullable=False)
    subtotal = Column(MONEY, nullable=False)

    order = relationship("Order", back_populates="details")
