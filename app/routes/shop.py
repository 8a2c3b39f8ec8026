# routes/shop.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.db.crud import shop as shop_crud
from app.db.schemas.shop import Shop
from app.dependencies import get_db

router = APIRouter(tags=["Shop"])

@router.get("/shop/{shop_id}", response_model=Shop)
def get_shop(shop_id: str, db: Session = Depends(get_db)):
    """Public shop profile, shown to customers and admins"""
    shop = shop_crud.get_shop(db, shop_id)
    if not shop:
        raise HTTPException(status_code=404, detail="Shop not found")
    return shop
