# storefront/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.api.params import UserId
from storefront.domain.schemas import OrderOut
from storefront.services.order_service import OrderService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("/{user_id}", response_model=List[OrderOut])
def list_orders(user_id: UserId, db: Session = Depends(get_db)):
    """Orders placed by the user, oldest first."""
    try:
        return OrderService(db).get_orders(user_id)
    except Exception:
        logger.exception(f"Error retrieving orders of user {user_id}")
        raise HTTPException(status_code=500, detail="Error retrieving orders")
