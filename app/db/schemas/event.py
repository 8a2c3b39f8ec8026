from pydantic import BaseModel, Field
from typing import Optional

class EventCreate(BaseModel):
    shop_id: str = Field(..., min_length=1)
    product_id: Optional[str] = None
    type: str = Field(..., min_length=1, description="e.g. shop_view, product_view, whatsapp, ar_view")

class EventAck(BaseModel):
    ok: bool = True
