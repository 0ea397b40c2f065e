# app/data/seed.py
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.database import Database
from app.data.models.product import ProductModel
from app.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

PRODUCTS = [
    {
        "name": "UNIFACTOR Mens Running Shoes",
        "category": "Fashion",
        "cost": Decimal("50"),
        "rating": 5,
        "image": "https://crio-directus-assets.s3.ap-south-1.amazonaws.com/42d4d057-8704-4174-8d74-e5e9052677c6.png",
    },
    {
        "name": "YONEX Smash Badminton Racquet",
        "category": "Sports",
        "cost": Decimal("100"),
        "rating": 5,
        "image": "https://crio-directus-assets.s3.ap-south-1.amazonaws.com/64b930f7-3c82-4a29-a433-dbc6f1493578.png",
    },
    {
        "name": "Tan Leatherette Weekender Duffle",
        "category": "Fashion",
        "cost": Decimal("150"),
        "rating": 4,
        "image": "https://crio-directus-assets.s3.ap-south-1.amazonaws.com/ff071a1c-1099-48f9-9b03-f858ccc53832.png",
    },
    {
        "name": "The Minimalist Slim Leather Watch",
        "category": "Electronics",
        "cost": Decimal("60"),
        "rating": 5,
        "image": "https://crio-directus-assets.s3.ap-south-1.amazonaws.com/5b478a4a-bf81-467c-964c-3881887799b4.png",
    },
]


def seed(db: Session) -> int:
    """Wstawia katalog produktow tylko gdy tabela jest pusta. Zwraca liczbe dodanych."""
    if db.execute(select(ProductModel).limit(1)).first():
        return 0

    db.add_all(ProductModel(**p) for p in PRODUCTS)
    db.commit()
    logger.info(f"Dodano {len(PRODUCTS)} produktow do katalogu")
    return len(PRODUCTS)


if __name__ == "__main__":
    setup_logging()
    database = Database()
    database.create_all()
    db = database.SessionLocal()
    try:
        seed(db)
    finally:
        db.close()
