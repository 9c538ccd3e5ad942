# foodpos/models/schemas.py
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import List, Optional

from foodpos.models.sql_models import MAX_ID


class RequestedLine(BaseModel):
    item_id: Optional[int] = Field(None, ge=1, le=MAX_ID, description="Menu item id")
    quantity: int
    # Client-side subtotal; never trusted, only compared with the server price
    claimed_subtotal: Optional[Decimal] = Field(None, max_digits=12, decimal_places=4)


class CreateOrderRequest(BaseModel):
    customer_id: int = Field(..., ge=1, le=MAX_ID)
    lines: Optional[List[Optional[RequestedLine]]] = None
    payment_type: str = Field(..., description="TNG, Grab or Bank")
    credential_identifier: Optional[str] = Field(None, description="Wallet id or card number")
    credential_secret: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "customer_id": 1000,
                "lines": [{"item_id": 2000, "quantity": 2, "claimed_subtotal": "21.00"}],
                "payment_type": "TNG",
                "credential_identifier": "TNG001",
                "credential_secret": "tng123",
            }
        }
    }


class OrderLineResponse(BaseModel):
    id: int
    menu_item_id: int
    item_name: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal

    model_config = {"from_attributes": True}


class OrderResponse(BaseModel):
    id: int
    order_date: datetime
    customer_id: int
    payment_method_id: int
    payment_type: str
    total_price: Decimal
    status: str
    details: List[OrderLineResponse] = []

    model_config = {"from_attributes": True}


class OrderReportResponse(BaseModel):
    order_count: int
    revenue: Decimal
    orders: List[OrderResponse]


class MenuItemResponse(BaseModel):
    id: int
    name: str
    price: Decimal
    category: str
    stock: int

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    error: str
    detail: str
