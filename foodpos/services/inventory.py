# foodpos/services/inventory.py
import logging

from sqlalchemy import update
from sqlalchemy.orm import Session

from foodpos.models.sql_models import MenuItem

logger = logging.getLogger(__name__)


class InventoryLedger:
    """Stock side of the menu: checks and moves unit counts."""

    def __init__(self, db: Session):
        self.db = db

    def has_stock(self, item_id: int, quantity: int) -> bool:
        item = self.db.get(MenuItem, item_id)
        return item is not None and item.stock >= quantity

    def decrement(self, item_id: int, quantity: int) -> bool:
        """
        Take ``quantity`` units in a single conditional UPDATE.

        The stock check and the subtraction are one statement, so two orders
        racing for the last units cannot both succeed. Returns False when the
        item is missing or short at the moment of the write.
        """
        if quantity is None or quantity <= 0:
            return False

        result = self.db.execute(
            update(MenuItem)
            .where(MenuItem.id == item_id, MenuItem.stock >= quantity)
            .values(stock=MenuItem.stock - quantity)
            .execution_options(synchronize_session="fetch")
        )
        self.db.flush()
        if result.rowcount != 1:
            logger.warning("Stock decrement refused for item %s (qty %s)", item_id, quantity)
            return False
        return True

    def restock(self, item_id: int, quantity: int) -> bool:
        if quantity is None or quantity <= 0:
            return False
        result = self.db.execute(
            update(MenuItem)
            .where(MenuItem.id == item_id)
            .values(stock=MenuItem.stock + quantity)
            .execution_options(synchronize_session="fetch")
        )
        self.db.flush()
        return result.rowcount == 1
