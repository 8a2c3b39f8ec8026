from sqlalchemy.orm import Session
from typing import Optional
from app.db.models.shop import Shop
from app.db.schemas.shop import ShopCreate

def get_shop(db: Session, shop_id: str) -> Optional[Shop]:
    return db.query(Shop).filter(Shop.id == shop_id).first()

def create_shop(db: Session, shop: ShopCreate) -> Shop:
    db_shop = Shop(**shop.model_dump())
    db.add(db_shop)
    db.commit()
    db.refresh(db_shop)
    return db_shop
