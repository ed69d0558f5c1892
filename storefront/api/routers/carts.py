# storefront/api/routers/carts.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.api.params import UserId
from storefront.domain.schemas import (
    ItemIn,
    QuantityIn,
    CartItemCreate,
    CartItemOut,
    CartLineOut,
    MessageOut,
)
from storefront.services.cart_service import CartService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


@router.get("/{user_id}", response_model=List[CartLineOut])
def get_cart(user_id: UserId, db: Session = Depends(get_db)):
    try:
        return get_service(db).get_cart(user_id)
    except Exception:
        logger.exception(f"Error retrieving cart of user {user_id}")
        raise HTTPException(status_code=500, detail="Error retrieving cart items")


@router.post("/{user_id}/add", response_model=CartItemOut, status_code=201)
def add_item(user_id: UserId, payload: ItemIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.add_product(
            CartItemCreate(
                user_id=user_id,
                product_id=payload.product_id,
                quantity=payload.quantity,
            )
        )
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception(f"Error adding product {payload.product_id} to cart of user {user_id}")
        raise HTTPException(status_code=500, detail="Error adding item to cart")


@router.put("/update/{item_id}", response_model=CartItemOut)
def update_item(item_id: int, payload: QuantityIn, db: Session = Depends(get_db)):
    try:
        item = get_service(db).update_quantity(item_id, payload.quantity)
    except Exception:
        logger.exception(f"Error updating cart item {item_id}")
        raise HTTPException(status_code=500, detail="Error updating cart item")

    if not item:
        raise HTTPException(status_code=404, detail="Cart item not found or removed")
    return item


@router.delete("/remove/{item_id}", response_model=MessageOut)
def remove_item(item_id: int, db: Session = Depends(get_db)):
    try:
        removed = get_service(db).remove_item(item_id)
    except Exception:
        logger.exception(f"Error removing cart item {item_id}")
        raise HTTPException(status_code=500, detail="Error removing item from cart")

    if not removed:
        raise HTTPException(status_code=404, detail="Cart item not found")
    return {"message": "Item removed from cart"}
