# foodpos/services/repositories.py
"""
Session-backed stores used by the ordering services.

Stores only ``flush``; committing or rolling back is left to whoever owns the
transaction (``OrderService`` for the order flow).
"""
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session, selectinload

from foodpos.models.sql_models import MAX_ID, Customer, MenuItem, Order, PaymentMethod


def _storable_id(value) -> bool:
    # Out-of-range ids cannot match a row and overflow the driver
    return 0 < value <= MAX_ID


class CustomerDirectory:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        if not _storable_id(customer_id):
            return None
        return self.db.get(Customer, customer_id)


class MenuCatalog:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, item_id: int) -> Optional[MenuItem]:
        if not _storable_id(item_id):
            return None
        return self.db.get(MenuItem, item_id)

    def find_all(self) -> List[MenuItem]:
        return list(self.db.scalars(select(MenuItem).order_by(MenuItem.id)))


class PaymentMethodStore:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, method_id: int) -> Optional[PaymentMethod]:
        return self.db.get(PaymentMethod, method_id)

    def find_by_wallet_id(self, wallet_id: str) -> Optional[PaymentMethod]:
        return self.db.scalars(
            select(PaymentMethod).where(PaymentMethod.wallet_id == wallet_id)
        ).first()

    def find_by_card_number(self, card_number: str) -> Optional[PaymentMethod]:
        return self.db.scalars(
            select(PaymentMethod).where(PaymentMethod.card_number == card_number)
        ).first()

    def authenticate_by_wallet_id(
        self, wallet_id: str, password_hash: str, payment_type: str
    ) -> Optional[PaymentMethod]:
        return self.db.scalars(
            select(PaymentMethod).where(
                PaymentMethod.wallet_id == wallet_id,
                PaymentMethod.password_hash == password_hash,
                PaymentMethod.payment_type == payment_type,
            )
        ).first()

    def authenticate_by_card_number(
        self, card_number: str, password_hash: str, payment_type: str
    ) -> Optional[PaymentMethod]:
        return self.db.scalars(
            select(PaymentMethod).where(
                PaymentMethod.card_number == card_number,
                PaymentMethod.password_hash == password_hash,
                PaymentMethod.payment_type == payment_type,
            )
        ).first()

    def update_balance(
        self, method_id: int, new_balance: Decimal, expected_balance: Optional[Decimal] = None
    ) -> bool:
        """Write a new balance; with ``expected_balance`` only if the row still holds it."""
        stmt = update(PaymentMethod).where(PaymentMethod.id == method_id)
        if expected_balance is not None:
            stmt = stmt.where(PaymentMethod.balance == expected_balance)
        result = self.db.execute(
            stmt.values(balance=new_balance).execution_options(synchronize_session="fetch")
        )
        self.db.flush()
        return result.rowcount == 1


class OrderStore:
    def __init__(self, db: Session):
        self.db = db

    def save(self, order: Order) -> Order:
        self.db.add(order)
        self.db.flush()
        return order

    def find_by_id(self, order_id: int) -> Optional[Order]:
        if not _storable_id(order_id):
            return None
        return self.db.get(Order, order_id, options=[selectinload(Order.details)])

    def find_by_customer_id(self, customer_id: int) -> List[Order]:
        return list(self.db.scalars(
            select(Order)
            .options(selectinload(Order.details))
            .where(Order.customer_id == customer_id)
            .order_by(Order.order_date.desc(), Order.id.desc())
        ))

    def find_all(self) -> List[Order]:
        return list(self.db.scalars(
            select(Order)
            .options(selectinload(Order.details))
            .order_by(Order.order_date.desc(), Order.id.desc())
        ))
