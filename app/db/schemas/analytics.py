from pydantic import BaseModel, Field

class AnalyticsSummary(BaseModel):
    visitors: int = Field(0, description="shop_view events")
    product_views: int = Field(0, description="product_view events")
    whatsapp: int = Field(0, description="whatsapp events")
    ar_views: int = Field(0, description="ar_view events")
