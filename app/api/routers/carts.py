#app/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.errors import ApiError
from app.domain.schemas import CartOut, ItemDeleteIn, ItemIn, ItemUpdateIn
from app.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


@router.get("", response_model=CartOut)
def get_cart(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.get_cart_by_user(user)
    except ApiError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("", response_model=CartOut, status_code=201)
def add_product(
    payload: ItemIn,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.add_product_to_cart(user, payload.product_id, payload.quantity)
    except ApiError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.put("", response_model=CartOut)
def update_product(
    payload: ItemUpdateIn,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        # quantity 0 = usuniecie produktu
        if payload.quantity == 0:
            svc.delete_product_from_cart(user, payload.product_id)
            return Response(status_code=204)
        return svc.update_product_in_cart(user, payload.product_id, payload.quantity)
    except ApiError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("", status_code=204)
def delete_product(
    payload: ItemDeleteIn,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        svc.delete_product_from_cart(user, payload.product_id)
    except ApiError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return Response(status_code=204)


@router.put("/checkout", status_code=204)
def checkout(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        svc.checkout(user)
    except ApiError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return Response(status_code=204)
