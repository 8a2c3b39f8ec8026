# models/shop.py
from sqlalchemy import Column, String
from app.database import Base

class Shop(Base):
    __tablename__ = "shops"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    tagline = Column(String, nullable=True)
    logo_url = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)
