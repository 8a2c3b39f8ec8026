import logging
from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status
from sqlalchemy.orm import Session
from typing import List, Optional
from app.config import Settings
from app.db.crud import product as product_crud
from app.db.schemas.auth import TokenData
from app.db.schemas.product import Product, ProductCreate, ProductStatus, ProductSummary, ProductUpdate
from app.dependencies import get_current_admin, get_db, get_settings
from app.storage import is_image, remove_uploads, save_uploads

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Products"])

# --- Customer ---

@router.get("/products", response_model=List[ProductSummary])
def list_products(
    shop: str = Query(..., min_length=1),
    db: Session = Depends(get_db)
):
    """Products of a shop, newest first"""
    return product_crud.get_products_by_shop(db, shop)

@router.get("/product/{product_id}", response_model=Product)
def get_product(product_id: str, db: Session = Depends(get_db)):
    """Single product by id. Not filtered by shop, so product links can be shared."""
    product = product_crud.get_product(db, product_id)
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product

# --- Admin ---

@router.post("/admin/product", response_model=ProductStatus, response_model_exclude_none=True)
def create_product(
    category: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    images: Optional[List[UploadFile]] = File(None),
    admin: TokenData = Depends(get_current_admin),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Create a product for the admin's own shop from a multipart form"""
    if not category or not category.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="category required")

    files = [f for f in (images or []) if f.filename]
    if not files:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="images required")
    if len(files) > settings.max_upload_images:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"at most {settings.max_upload_images} images allowed"
        )
    if not all(is_image(f) for f in files):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="images must be image files")

    product_data = ProductCreate(category=category, description=description or "")
    image_urls = save_uploads(files, settings.upload_dir)
    try:
        product = product_crud.create_product(db, admin.shop_id, product_data, image_urls)
    except Exception:
        remove_uploads(image_urls, settings.upload_dir)
        raise
    logger.info(f"Created product {product.id} for shop {admin.shop_id} with {len(image_urls)} image(s)")
    return {"status": "created", "id": product.id}

@router.put("/admin/product/{product_id}", response_model=ProductStatus, response_model_exclude_none=True)
def update_product(
    product_id: str,
    product: ProductUpdate,
    admin: TokenData = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Update a product owned by the admin's shop. Other shops' products are left untouched."""
    count = product_crud.update_product(db, product_id, admin.shop_id, product)
    logger.info(f"Update of product {product_id} by shop {admin.shop_id} affected {count} row(s)")
    return {"status": "updated"}

@router.delete("/admin/product/{product_id}", response_model=ProductStatus, response_model_exclude_none=True)
def delete_product(
    product_id: str,
    admin: TokenData = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Delete a product owned by the admin's shop. Other shops' products are left untouched."""
    count = product_crud.delete_product(db, product_id, admin.shop_id)
    logger.info(f"Delete of product {product_id} by shop {admin.shop_id} affected {count} row(s)")
    return {"status": "deleted"}
