from sqlalchemy import Column, String, DateTime, ForeignKey
from datetime import datetime
import uuid
from app.database import Base

class Event(Base):
    __tablename__ = "events"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    shop_id = Column(String, ForeignKey("shops.id"), nullable=False, index=True)
    product_id = Column(String, nullable=True)  # no FK: events outlive deleted products
    type = Column(String, nullable=False)  # e.g. shop_view, product_view, whatsapp, ar_view
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
