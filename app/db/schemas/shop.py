from pydantic import BaseModel, ConfigDict
from typing import Optional

class ShopBase(BaseModel):
    name: str
    tagline: Optional[str] = None
    logo_url: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

class ShopCreate(ShopBase):
    id: str

class Shop(ShopBase):
    id: str

    model_config = ConfigDict(from_attributes=True)
