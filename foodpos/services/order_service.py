# foodpos/services/order_service.py
"""
Order fulfillment.

``create_order`` turns a cart plus a payment credential into a paid, stock
adjusted, persisted order, or raises an ``OrderingError`` and leaves the
database as it found it.

Validation (customer, lines, quantities, stock, prices) only reads. Payment,
stock decrements and the order insert share one transaction that this service
commits once at the end; any failure among them rolls all of them back.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from foodpos.core.config import settings
from foodpos.core.errors import (
    CustomerNotFound, EmptyOrder, InsufficientStock, InvalidLine, InvalidQuantity,
    ItemNotFound, OrderingError, PaymentMethodNotFound, PersistenceFailed,
    PriceMismatch, StockUpdateFailed,
)
from foodpos.core.money import money
from foodpos.models.sql_models import MenuItem, Order, OrderDetail, OrderStatus, utc_now
from foodpos.services.inventory import InventoryLedger
from foodpos.services.payment_authorizer import PaymentAuthorizer
from foodpos.services.payments import BankPayment, PaymentInstrument
from foodpos.services.repositories import (
    CustomerDirectory, MenuCatalog, OrderStore, PaymentMethodStore,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfirmedLine:
    item: MenuItem
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


@dataclass(frozen=True)
class OrderReport:
    order_count: int
    revenue: Decimal
    orders: List[Order]


class OrderService:
    def __init__(self, db: Session, max_quantity_per_line: Optional[int] = None):
        self.db = db
        self.customers = CustomerDirectory(db)
        self.menu = MenuCatalog(db)
        self.orders = OrderStore(db)
        self.payment_methods = PaymentMethodStore(db)
        self.inventory = InventoryLedger(db)
        self.payments = PaymentAuthorizer(db, self.payment_methods)
        self.max_quantity_per_line = (
            settings.MAX_QUANTITY_PER_LINE if max_quantity_per_line is None else max_quantity_per_line
        )

    def create_order(
        self,
        customer_id: int,
        lines,
        payment_type: str,
        credential_identifier: Optional[str] = None,
        credential_secret: Optional[str] = None,
    ) -> Order:
        customer = self.customers.find_by_id(customer_id)
        if customer is None:
            raise CustomerNotFound(customer_id)

        if not lines:
            raise EmptyOrder()

        confirmed = self.confirm_lines(lines)
        total = self.calculate_total_price(confirmed)

        try:
            instrument = self.payments.authorize_and_debit(
                payment_type, credential_identifier, credential_secret, total
            )
            method = self._resolve_payment_method(instrument)

            for line in confirmed:
                if not self.inventory.decrement(line.item.id, line.quantity):
                    raise StockUpdateFailed(line.item.name)

            order = Order(
                order_date=utc_now(),
                customer_id=customer.id,
                payment_method_id=method.id,
                payment_type=method.payment_type,
                total_price=total,
                status=OrderStatus.COMPLETED.value,
                details=[
                    OrderDetail(
                        menu_item_id=line.item.id,
                        item_name=line.item.name,
                        quantity=line.quantity,
                        unit_price=line.unit_price,
                        subtotal=line.subtotal,
                    )
                    for line in confirmed
                ],
            )
            self.orders.save(order)
            self.db.commit()
        except OrderingError as e:
            self.db.rollback()
            logger.warning("Order for customer %s rejected during settlement: %s", customer_id, e)
            raise
        except PersistenceFailed:
            self.db.rollback()
            logger.critical("Order for customer %s rolled back after a failed write", customer_id)
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Database error while placing order for customer %s", customer_id)
            raise PersistenceFailed(str(e)) from e

        logger.info(
            "Order %s completed for customer %s: %s via %s",
            order.id, customer.id, total, order.payment_type,
        )
        return order

    def confirm_lines(self, lines: Iterable) -> List[ConfirmedLine]:
        """Reprice every requested line from the menu and check it against stock."""
        confirmed = []
        for index, line in enumerate(lines):
            item_id = getattr(line, "item_id", None) if line is not None else None
            if item_id is None:
                raise InvalidLine(index)

            quantity = line.quantity
            if quantity is None or quantity <= 0 or quantity > self.max_quantity_per_line:
                raise InvalidQuantity(quantity, self.max_quantity_per_line)

            item = self.menu.find_by_id(item_id)
            if item is None:
                raise ItemNotFound(item_id)

            if item.stock < quantity:
                raise InsufficientStock(item.name, item.stock, quantity)

            unit_price = money(item.price)
            expected = money(unit_price * quantity)
            raw_claim = getattr(line, "claimed_subtotal", None)
            try:
                claimed = money(raw_claim)
            except InvalidOperation:
                # Too large or malformed to round to cents; cannot equal the menu price
                raise PriceMismatch(item.name, expected, raw_claim) from None
            if claimed is None or claimed != expected:
                raise PriceMismatch(item.name, expected, claimed)

            confirmed.append(ConfirmedLine(item, quantity, unit_price, expected))
        return confirmed

    def calculate_total_price(self, lines: Iterable[ConfirmedLine]) -> Decimal:
        # Sum exact subtotals, round once
        return money(sum((line.subtotal for line in lines), Decimal("0")))

    def _resolve_payment_method(self, instrument: PaymentInstrument):
        if isinstance(instrument, BankPayment):
            identifier = instrument.card_number
            method = self.payment_methods.find_by_card_number(identifier)
        else:
            identifier = instrument.wallet_id
            method = self.payment_methods.find_by_wallet_id(identifier)
        if method is None:
            logger.error("Payment method %s vanished after authorization", identifier)
            raise PaymentMethodNotFound(identifier)
        return method

    # --- Reporting ---

    def get_order(self, order_id: int) -> Optional[Order]:
        return self.orders.find_by_id(order_id)

    def get_all_orders(self) -> List[Order]:
        return self.orders.find_all()

    def get_orders_by_customer_id(self, customer_id: int) -> List[Order]:
        if self.customers.find_by_id(customer_id) is None:
            raise CustomerNotFound(customer_id)
        return self.orders.find_by_customer_id(customer_id)

    def build_report(self) -> OrderReport:
        orders = self.get_all_orders()
        revenue = money(sum(
            (money(o.total_price) for o in orders if o.status == OrderStatus.COMPLETED.value),
            Decimal("0"),
        ))
        return OrderReport(order_count=len(orders), revenue=revenue, orders=orders)
