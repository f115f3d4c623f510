# app/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class Manufacturer(BaseModel):
    id: UUID
    name: str
    address: str | None = None
    contact: str | None = None


class Review(BaseModel):
    reviewer_name: str
    comment: str | None = None
    rating: int = Field(..., ge=1, le=5)
    review_date: datetime | None = None


class Product(BaseModel):
    """Product snapshot as served by the product service."""

    id: UUID
    name: str
    description: str | None = None
    price: Decimal
    manufacturer: Manufacturer | None = None
    categories: List[str] = []
    reviews: List[Review] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(frozen=True)


class Cart(BaseModel):
    id: UUID
    products: List[Product] = []
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CartRequestIn(BaseModel):
    """Body of create and replace requests."""

    products: List[UUID] = Field(..., description="Product ids to put in the cart")
