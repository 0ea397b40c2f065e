# app/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.errors import ApiError
from app.domain.schemas import ProductOut
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[ProductOut])
def get_products(db: Session = Depends(get_db)):
    return ProductService(db).get_products()


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    try:
        return ProductService(db).get_product_by_id(product_id)
    except ApiError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
