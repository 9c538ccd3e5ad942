"""initial schema: customers, menu, payment methods, orders

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("age", sa.Integer()),
        sa.Column("phone_number", sa.String(11)),
        sa.Column("gender", sa.String(10)),
        sa.Column("password_hash", sa.String(64)),
    )
    op.create_index("ix_customers_id", "customers", ["id"])
    op.create_index("ix_customers_phone_number", "customers", ["phone_number"], unique=True)

    op.create_table(
        "menu_items",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("stock", sa.Integer(), nullable=False),
        sa.CheckConstraint("stock >= 0", name="ck_menu_items_stock_non_negative"),
        sa.CheckConstraint("price > 0", name="ck_menu_items_price_positive"),
    )
    op.create_index("ix_menu_items_id", "menu_items", ["id"])
    op.create_index("ix_menu_items_name", "menu_items", ["name"], unique=True)

    op.create_table(
        "payment_methods",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("customer_id", sa.Integer(), sa.ForeignKey("customers.id"), nullable=True),
        sa.Column("payment_type", sa.String(20), nullable=False),
        sa.Column("wallet_id", sa.String(50), nullable=True),
        sa.Column("card_number", sa.String(16), nullable=True),
        sa.Column("expiry_date", sa.String(4), nullable=True),
        sa.Column("password_hash", sa.String(64), nullable=False),
        sa.Column("balance", sa.Numeric(10, 2), nullable=False),
        sa.CheckConstraint("balance >= 0", name="ck_payment_methods_balance_non_negative"),
    )
    op.create_index("ix_payment_methods_id", "payment_methods", ["id"])
    op.create_index("ix_payment_methods_wallet_id", "payment_methods", ["wallet_id"], unique=True)
    op.create_index("ix_payment_methods_card_number", "payment_methods", ["card_number"], unique=True)

    op.create_table(
        "orders",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("order_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("customer_id", sa.Integer(), sa.ForeignKey("customers.id"), nullable=False),
        sa.Column("payment_method_id", sa.Integer(), sa.ForeignKey("payment_methods.id"), nullable=False),
        sa.Column("payment_type", sa.String(20), nullable=False),
        sa.Column("total_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
    )
    op.create_index("ix_orders_id", "orders", ["id"])
    op.create_index("ix_orders_customer_id", "orders", ["customer_id"])

    op.create_table(
        "order_details",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("order_id", sa.Integer(), sa.ForeignKey("orders.id"), nullable=False),
        sa.Column("menu_item_id", sa.Integer(), sa.ForeignKey("menu_items.id"), nullable=False),
        sa.Column("item_name", sa.String(100), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("unit_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("subtotal", sa.Numeric(10, 2), nullable=False),
    )
    op.create_index("ix_order_details_id", "order_details", ["id"])
    op.create_index("ix_order_details_order_id", "order_details", ["order_id"])


def downgrade() -> None:
    op.drop_table("order_details")
    op.drop_table("orders")
    op.drop_table("payment_methods")
    op.drop_table("menu_items")
    op.drop_table("customers")
