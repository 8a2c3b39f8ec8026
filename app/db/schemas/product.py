from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List
from datetime import datetime

class ProductCreate(BaseModel):
    category: str = Field(..., min_length=1, description="Product category, also used as its display name")
    description: str = Field("", description="Free-text description")

    @field_validator("category", mode="before")
    @classmethod
    def strip_category(cls, value):
        return value.strip() if isinstance(value, str) else value

class ProductUpdate(BaseModel):
    category: str = Field(..., min_length=1)
    description: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("category", mode="before")
    @classmethod
    def strip_category(cls, value):
        return value.strip() if isinstance(value, str) else value

class ProductSummary(BaseModel):
    """Shape returned by the per-shop listing"""
    id: str
    category: str
    description: str
    image_urls: List[str] = []
    ar_model: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class Product(ProductSummary):
    shop_id: str
    is_active: bool
    created_at: datetime

class ProductStatus(BaseModel):
    status: str
    id: Optional[str] = None
