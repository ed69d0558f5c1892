# storefront/api/routers/checkout.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.api.params import UserId
from storefront.domain.schemas import CheckoutIn, OrderOut
from storefront.services.order_service import OrderService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/checkout", tags=["checkout"])


@router.post("/{user_id}", response_model=OrderOut, status_code=201)
def checkout(user_id: UserId, payload: CheckoutIn, db: Session = Depends(get_db)):
    """
    Turns the user's cart into an order and empties the cart.
    Card data is stored on the order as submitted; no payment is made.
    """
    svc = OrderService(db)
    try:
        return svc.checkout(user_id, payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception(f"Error processing checkout for user {user_id}")
        raise HTTPException(status_code=500, detail="Error processing checkout")
