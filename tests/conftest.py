"""
Shared fixtures: an in-memory SQLite database per test plus the standard
customer, menu item and payment instruments used across the suite.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from foodpos.core.database import Base, get_db
from foodpos.core.security import hash_password
from foodpos.models.schemas import RequestedLine
from foodpos.models.sql_models import Customer, MenuItem, PaymentMethod
from foodpos.services.order_service import OrderService

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def customer(db):
    c = Customer(
        id=1000, name="John", age=25, phone_number="0123456789",
        gender="M", password_hash=hash_password("pass"),
    )
    db.add(c)
    db.commit()
    return c


@pytest.fixture
def food(db):
    item = MenuItem(id=2000, name="Nasi Lemak", price=Decimal("10.50"), category="Set", stock=50)
    db.add(item)
    db.commit()
    return item


@pytest.fixture
def cheap_food(db):
    item = MenuItem(id=2001, name="Teh Tarik", price=Decimal("1.00"), category="A la carte", stock=200)
    db.add(item)
    db.commit()
    return item


@pytest.fixture
def tng_wallet(db, customer):
    pm = PaymentMethod(
        id=1, customer_id=customer.id, payment_type="TNG", wallet_id="TNG001",
        password_hash=hash_password("tng123"), balance=Decimal("100.00"),
    )
    db.add(pm)
    db.commit()
    return pm


@pytest.fixture
def grab_wallet(db, customer):
    pm = PaymentMethod(
        id=2, customer_id=customer.id, payment_type="Grab", wallet_id="GRAB001",
        password_hash=hash_password("grab456"), balance=Decimal("100.00"),
    )
    db.add(pm)
    db.commit()
    return pm


@pytest.fixture
def bank_card(db, customer):
    pm = PaymentMethod(
        id=3, customer_id=customer.id, payment_type="Bank", card_number="1234567812345678",
        expiry_date="1228", password_hash=hash_password("bank123"), balance=Decimal("200.00"),
    )
    db.add(pm)
    db.commit()
    return pm


@pytest.fixture
def order_service(db):
    return OrderService(db)


@pytest.fixture
def client(db):
    from main import app

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def make_line(item_id=2000, quantity=2, subtotal="21.00"):
    return RequestedLine(
        item_id=item_id,
        quantity=quantity,
        claimed_subtotal=Decimal(subtotal) if subtotal is not None else None,
    )
