# storefront/domain/schemas.py
import re
from pydantic import BaseModel, Field, ConfigDict, EmailStr, StrictInt, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, Dict
from decimal import Decimal
from datetime import datetime, timezone

from storefront.repos import MAX_ID


class CamelModel(BaseModel):
    """snake_case attributes, camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---------- products ----------

class Rating(CamelModel):
    rate: float = 0
    count: int = 0


class ProductIn(CamelModel):
    """Product as delivered by the remote catalog; remote ids are ignored."""

    title: str
    price: Decimal = Field(..., ge=0)
    description: str = ""
    category: str
    image: str = ""
    rating: Rating = Field(default_factory=Rating)


class ProductOut(CamelModel):
    id: int
    title: str
    price: Decimal
    description: str
    category: str
    image: str
    rating: Rating


# ---------- cart ----------

class ItemIn(CamelModel):
    """Schema for adding a product to a cart."""

    # strict: "3" and true are not numbers
    product_id: StrictInt = Field(..., description="Product ID")
    quantity: StrictInt = Field(..., gt=0, le=MAX_ID, description="Quantity (must be > 0)")


class QuantityIn(CamelModel):
    quantity: StrictInt = Field(..., gt=0, le=MAX_ID)


class CartItemCreate(CamelModel):
    product_id: int
    user_id: int
    quantity: int


class CartItemOut(CamelModel):
    id: int
    product_id: int
    user_id: int
    quantity: int


class CartLineOut(CamelModel):
    """Cart row joined with its product; product is None when it no longer resolves."""

    id: int
    product: ProductOut | None = None
    quantity: int


# ---------- checkout / orders ----------

_ZIP = re.compile(r"^\d{5}$")
_CARD = re.compile(r"^\d{16}$")
_EXPIRATION = re.compile(r"^(0[1-9]|1[0-2])/\d{2}$")
_CVV = re.compile(r"^\d{3,4}$")


class CheckoutIn(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    zip: str
    card_number: str
    expiration: str
    cvv: str

    @field_validator("zip")
    @classmethod
    def check_zip(cls, v: str) -> str:
        if not _ZIP.match(v):
            raise ValueError("Zip code must be 5 digits")
        return v

    @field_validator("card_number")
    @classmethod
    def check_card_number(cls, v: str) -> str:
        if not _CARD.match(v):
            raise ValueError("Card number must be 16 digits")
        return v

    @field_validator("expiration")
    @classmethod
    def check_expiration(cls, v: str) -> str:
        if not _EXPIRATION.match(v):
            raise ValueError("Expiration date format: MM/YY")
        return v

    @field_validator("cvv")
    @classmethod
    def check_cvv(cls, v: str) -> str:
        if not _CVV.match(v):
            raise ValueError("CVV must be 3 or 4 digits")
        return v


class OrderCreate(CamelModel):
    user_id: int
    total_amount: Decimal
    shipping_address: str
    payment_details: Dict[str, Any]
    status: str = "completed"


class OrderOut(CamelModel):
    id: int
    user_id: int
    order_date: datetime
    total_amount: Decimal
    shipping_address: str
    payment_details: Dict[str, Any]
    status: str

    @field_validator("order_date")
    @classmethod
    def as_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes; they were written as UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


# ---------- users ----------

class UserCreate(CamelModel):
    """Schema for registering a user."""

    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)


class UserRead(CamelModel):
    id: int
    username: str


class MessageOut(BaseModel):
    message: str


class HealthOut(BaseModel):
    status: str
    products: int
