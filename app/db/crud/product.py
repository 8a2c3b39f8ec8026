from sqlalchemy.orm import Session
from typing import List, Optional
import uuid
from app.db.models.product import Product
from app.db.schemas.product import ProductCreate, ProductUpdate

def get_product(db: Session, product_id: str) -> Optional[Product]:
    return db.query(Product).filter(Product.id == product_id).first()

def get_products_by_shop(db: Session, shop_id: str) -> List[Product]:
    return db.query(Product).filter(
        Product.shop_id == shop_id
    ).order_by(Product.created_at.desc()).all()

def create_product(db: Session, shop_id: str, product: ProductCreate, image_urls: List[str]) -> Product:
    db_product = Product(
        id=str(uuid.uuid4()),
        shop_id=shop_id,
        category=product.category,
        description=product.description or "",
        image_urls=image_urls,
    )
    db.add(db_product)
    db.commit()
    db.refresh(db_product)
    return db_product

# Update and delete filter on both id and owning shop, and return the number
# of affected rows. Zero means the product is missing or owned by another shop.

def update_product(db: Session, product_id: str, shop_id: str, product: ProductUpdate) -> int:
    values = {
        Product.category: product.category,
        Product.description: product.description or "",
    }
    if product.is_active is not None:
        values[Product.is_active] = product.is_active
    count = db.query(Product).filter(
        Product.id == product_id,
        Product.shop_id == shop_id
    ).update(values, synchronize_session=False)
    db.commit()
    return count

def delete_product(db: Session, product_id: str, shop_id: str) -> int:
    count = db.query(Product).filter(
        Product.id == product_id,
        Product.shop_id == shop_id
    ).delete(synchronize_session=False)
    db.commit()
    return count

def set_ar_model(db: Session, product_id: str, ar_model: Optional[str]) -> int:
    count = db.query(Product).filter(
        Product.id == product_id
    ).update({Product.ar_model: ar_model}, synchronize_session=False)
    db.commit()
    return count
