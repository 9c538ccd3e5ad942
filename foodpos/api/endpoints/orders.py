# foodpos/api/endpoints/orders.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from foodpos.core.database import get_db
from foodpos.models.schemas import (
    CreateOrderRequest, ErrorResponse, OrderReportResponse, OrderResponse,
)
from foodpos.services.order_service import OrderService

router = APIRouter()


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={402: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def create_order(payload: CreateOrderRequest, db: Session = Depends(get_db)):
    order = OrderService(db).create_order(
        customer_id=payload.customer_id,
        lines=payload.lines,
        payment_type=payload.payment_type,
        credential_identifier=payload.credential_identifier,
        credential_secret=payload.credential_secret,
    )
    return order


# --- ADMIN REPORT ---
@router.get("", response_model=OrderReportResponse)
def order_report(db: Session = Depends(get_db)):
    report = OrderService(db).build_report()
    return OrderReportResponse(
        order_count=report.order_count,
        revenue=report.revenue,
        orders=[OrderResponse.model_validate(o) for o in report.orders],
    )


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(order_id: int, db: Session = Depends(get_db)):
    order = OrderService(db).get_order(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
