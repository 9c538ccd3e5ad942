# foodpos/services/payment_authorizer.py
import logging
from dataclasses import replace
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from foodpos.core.errors import InsufficientFunds, InvalidCredential, PersistenceFailed
from foodpos.core.money import money
from foodpos.core.security import hash_password
from foodpos.services.payments import (
    PaymentInstrument, is_wallet, normalize_payment_type, payment_from_method,
)
from foodpos.services.repositories import PaymentMethodStore

logger = logging.getLogger(__name__)


class PaymentAuthorizer:
    def __init__(self, db: Session, store: Optional[PaymentMethodStore] = None):
        self.db = db
        self.store = store or PaymentMethodStore(db)

    def authenticate(self, payment_type: str, identifier: str, secret: str):
        """Return the stored method matching identifier, secret and type exactly."""
        payment_type = normalize_payment_type(payment_type)
        if not identifier or secret is None:
            raise InvalidCredential()

        password_hash = hash_password(secret)
        if is_wallet(payment_type):
            method = self.store.authenticate_by_wallet_id(identifier, password_hash, payment_type)
        else:
            method = self.store.authenticate_by_card_number(identifier, password_hash, payment_type)

        if method is None:
            logger.warning("Payment authentication failed for %s %s", payment_type, identifier)
            raise InvalidCredential()
        return method

    def authorize_and_debit(
        self, payment_type: str, identifier: str, secret: str, amount: Decimal
    ) -> PaymentInstrument:
        """
        Authenticate the instrument owner, charge ``amount`` and persist the balance.

        Returns the instrument as it stands after the debit. The balance write is
        flushed, not committed: the caller's transaction decides its fate.
        """
        amount = money(amount)
        method = self.authenticate(payment_type, identifier, secret)
        instrument = payment_from_method(method)

        if not instrument.can_afford(amount):
            raise InsufficientFunds(instrument.charge_for(amount), instrument.balance)

        new_balance = instrument.debit(amount)
        if not self.store.update_balance(method.id, new_balance, expected_balance=instrument.balance):
            logger.error(
                "Balance write for payment method %s was not applied (%s -> %s)",
                method.id, instrument.balance, new_balance,
            )
            raise PersistenceFailed(f"Failed to update balance for payment method {method.id}")

        logger.info("Debited %s from %s payment method %s", instrument.charge_for(amount), instrument.name, method.id)
        return replace(instrument, balance=new_balance)
