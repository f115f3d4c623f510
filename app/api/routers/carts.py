#app/api/routers/carts.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response

from app.domain.schemas import Cart, CartRequestIn
from app.services.cart_service import CartService

router = APIRouter(prefix="/shopping/cart", tags=["carts"])


def get_service(request: Request) -> CartService:
    return request.app.state.cart_service


@router.post("", response_model=Cart)
async def create_cart(payload: CartRequestIn, svc: CartService = Depends(get_service)):
    return await svc.create_cart(payload.products)


@router.get("", response_model=Cart)
async def get_cart(cart_id: UUID = Query(...), svc: CartService = Depends(get_service)):
    return await svc.get_cart(cart_id)


@router.put("", response_model=Cart)
async def edit_cart(
    payload: CartRequestIn,
    cart_id: UUID = Query(...),
    svc: CartService = Depends(get_service),
):
    return await svc.edit_cart(cart_id, payload.products)


@router.patch("/add", response_model=Cart)
async def add_products(
    cart_id: UUID = Query(...),
    product_ids: List[UUID] = Query(...),
    svc: CartService = Depends(get_service),
):
    return await svc.add_products(cart_id, product_ids)


@router.patch("/remove", response_model=Cart)
async def remove_products(
    cart_id: UUID = Query(...),
    product_ids: List[UUID] = Query([]),
    svc: CartService = Depends(get_service),
):
    return await svc.remove_products(cart_id, product_ids)


@router.delete("", status_code=204)
async def delete_cart(cart_id: UUID = Query(...), svc: CartService = Depends(get_service)):
    await svc.delete_cart(cart_id)
    return Response(status_code=204)
