# storefront/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import ProductOut
from storefront.services.product_service import ProductService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["products"])


def get_service(db: Session):
    return ProductService(db)


@router.get("/products", response_model=List[ProductOut])
def list_products(db: Session = Depends(get_db)):
    try:
        return get_service(db).get_products()
    except Exception:
        logger.exception("Error retrieving products")
        raise HTTPException(status_code=500, detail="Error retrieving products")


@router.get("/products/category/{category}", response_model=List[ProductOut])
def list_products_by_category(category: str, db: Session = Depends(get_db)):
    try:
        return get_service(db).get_products_by_category(category)
    except Exception:
        logger.exception(f"Error retrieving products for category {category!r}")
        raise HTTPException(status_code=500, detail="Error retrieving products by category")


@router.get("/products/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    try:
        product = get_service(db).get_product(product_id)
    except Exception:
        logger.exception(f"Error retrieving product {product_id}")
        raise HTTPException(status_code=500, detail="Error retrieving product")

    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.get("/categories", response_model=List[str])
def list_categories(db: Session = Depends(get_db)):
    try:
        return get_service(db).get_categories()
    except Exception:
        logger.exception("Error retrieving categories")
        raise HTTPException(status_code=500, detail="Error retrieving categories")
