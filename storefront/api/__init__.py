# storefront/api/__init__.py
from fastapi import APIRouter
from storefront.api.routers import products, carts, checkout, orders, users, health

api_router = APIRouter(prefix="/api")
api_router.include_router(health.router)
api_router.include_router(products.router)
api_router.include_router(carts.router)
api_router.include_router(checkout.router)
api_router.include_router(orders.router)
api_router.include_router(users.router)
