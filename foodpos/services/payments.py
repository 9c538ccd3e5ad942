# foodpos/services/payments.py
"""
Payment instruments.

Each stored ``PaymentMethod`` row becomes one of three immutable variants. They
share the ``can_afford`` / ``debit`` capability; only the card carries a fee and
card details, only the wallets carry a wallet id.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from foodpos.core.config import settings
from foodpos.core.errors import InsufficientFunds, UnsupportedPaymentType
from foodpos.core.money import money

PAYMENT_TYPE_TNG = "TNG"
PAYMENT_TYPE_GRAB = "Grab"
PAYMENT_TYPE_BANK = "Bank"

PAYMENT_TYPES = (PAYMENT_TYPE_TNG, PAYMENT_TYPE_GRAB, PAYMENT_TYPE_BANK)
WALLET_TYPES = (PAYMENT_TYPE_TNG, PAYMENT_TYPE_GRAB)


def normalize_payment_type(payment_type: Optional[str]) -> str:
    """Map any casing of TNG/Grab/Bank to its canonical spelling."""
    if payment_type is not None:
        for known in PAYMENT_TYPES:
            if payment_type.upper() == known.upper():
                return known
    raise UnsupportedPaymentType(payment_type)


def is_wallet(payment_type: str) -> bool:
    return normalize_payment_type(payment_type) in WALLET_TYPES


class _Instrument:
    balance: Decimal

    def charge_for(self, amount) -> Decimal:
        return money(amount)

    def can_afford(self, amount) -> bool:
        return self.balance >= self.charge_for(amount)

    def debit(self, amount) -> Decimal:
        """Return the balance left after paying ``amount``."""
        charge = self.charge_for(amount)
        if self.balance < charge:
            raise InsufficientFunds(charge, self.balance)
        return money(self.balance - charge)


@dataclass(frozen=True)
class TngPayment(_Instrument):
    balance: Decimal
    wallet_id: str
    name = PAYMENT_TYPE_TNG


@dataclass(frozen=True)
class GrabPayment(_Instrument):
    balance: Decimal
    wallet_id: str
    name = PAYMENT_TYPE_GRAB


@dataclass(frozen=True)
class BankPayment(_Instrument):
    balance: Decimal
    card_number: str
    expiry_date: Optional[str] = None
    transaction_fee: Decimal = settings.BANK_TRANSACTION_FEE
    name = PAYMENT_TYPE_BANK

    def charge_for(self, amount) -> Decimal:
        return money(money(amount) + self.transaction_fee)


PaymentInstrument = Union[TngPayment, GrabPayment, BankPayment]


def payment_from_method(method) -> PaymentInstrument:
    """Build the instrument variant for a stored payment method row."""
    payment_type = normalize_payment_type(method.payment_type)
    balance = money(method.balance)

    if payment_type == PAYMENT_TYPE_TNG:
        return TngPayment(balance=balance, wallet_id=method.wallet_id)
    if payment_type == PAYMENT_TYPE_GRAB:
        return GrabPayment(balance=balance, wallet_id=method.wallet_id)
    return BankPayment(
        balance=balance,
        card_number=method.card_number,
        expiry_date=method.expiry_date,
        transaction_fee=money(settings.BANK_TRANSACTION_FEE),
    )
