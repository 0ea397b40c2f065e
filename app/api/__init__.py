# app/api/__init__.py
from fastapi import APIRouter
from app.api.routers import auth, users, products, carts

api_router = APIRouter(prefix="/v1")
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(products.router)
api_router.include_router(carts.router)
