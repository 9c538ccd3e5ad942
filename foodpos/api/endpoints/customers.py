# foodpos/api/endpoints/customers.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from foodpos.core.database import get_db
from foodpos.models.schemas import OrderResponse
from foodpos.services.order_service import OrderService

router = APIRouter()


@router.get("/{customer_id}/orders", response_model=List[OrderResponse])
def customer_orders(customer_id: int, db: Session = Depends(get_db)):
    return OrderService(db).get_orders_by_customer_id(customer_id)
