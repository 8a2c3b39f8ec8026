from sqlalchemy.orm import Session
from typing import Optional
from app.db.models.admin import Admin

def get_admin_by_email(db: Session, email: str) -> Optional[Admin]:
    return db.query(Admin).filter(Admin.email == email).first()

def create_admin(db: Session, email: str, password_hash: str, shop_id: str, role: str = "admin") -> Admin:
    db_admin = Admin(email=email, password=password_hash, shop_id=shop_id, role=role)
    db.add(db_admin)
    db.commit()
    db.refresh(db_admin)
    return db_admin
