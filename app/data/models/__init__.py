# import every model so SQLAlchemy registers it on Base.metadata

from app.data.models.cart import CartModel

__all__ = ["CartModel"]
