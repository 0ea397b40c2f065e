# app/services/product_service.py
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.domain.errors import NotFoundError
from app.repos.product_repo import ProductRepo


class ProductService:
    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def get_products(self) -> list[ProductModel]:
        return self.repo.list_products()

    def get_product_by_id(self, product_id: int) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product
