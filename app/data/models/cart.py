#app/data/models/cart.py
import uuid

from sqlalchemy import Column, DateTime, JSON, Uuid

from app.data.database import Base


class CartModel(Base):
    __tablename__ = "carts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    # denormalized product snapshots, stored as returned by the product service
    products = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
