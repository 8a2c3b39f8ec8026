from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, JSON
from datetime import datetime
import uuid
from app.database import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    shop_id = Column(String, ForeignKey("shops.id"), nullable=False, index=True)
    category = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    image_urls = Column(JSON, nullable=False, default=list)  # e.g. ["/uploads/1712-front.jpg"]
    ar_model = Column(String, nullable=True)  # set out-of-band, see app.init_db
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<Product(id='{self.id}', shop_id='{self.shop_id}', category='{self.category}')>"
