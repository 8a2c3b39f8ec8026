from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from datetime import datetime
from app.database import Base

class Admin(Base):
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, nullable=False, unique=True, index=True)
    password = Column(String, nullable=False)  # bcrypt hash, never plaintext
    shop_id = Column(String, ForeignKey("shops.id"), nullable=False)
    role = Column(String, nullable=False, default="admin")
    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<Admin(id={self.id}, email='{self.email}', shop_id='{self.shop_id}')>"
