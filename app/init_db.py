# init_db.py
"""
Out-of-band provisioning. Admin accounts and AR models are only ever created here.

    python -m app.init_db init
    python -m app.init_db create-shop --id demo --name "Demo Shop" --phone 9876543210
    python -m app.init_db create-admin --email owner@example.com --password ... --shop-id demo
    python -m app.init_db set-ar-model --product-id <id> --ar-model https://cdn.example.com/chair.glb
"""
import argparse
import sys
from sqlalchemy.orm import Session
from app.config import Settings
from app.database import Base, create_db_engine, create_session_factory
from app.db.crud import admin as admin_crud
from app.db.crud import product as product_crud
from app.db.crud import shop as shop_crud
from app.db.schemas.shop import ShopCreate
from app.security import hash_password

# Import all models to ensure they are registered with SQLAlchemy
from app.db.models import Shop, Admin, Product, Event

DEMO_SHOP_ID = "demo"

def seed(db: Session):
    # Seed shop
    if not db.query(Shop).first():
        db.add(Shop(
            id=DEMO_SHOP_ID,
            name="Demo Shop",
            tagline="Welcome to our store",
        ))
    db.commit()

def create_shop(db: Session, shop: ShopCreate) -> Shop:
    if shop_crud.get_shop(db, shop.id):
        raise ValueError(f"Shop '{shop.id}' already exists")
    return shop_crud.create_shop(db, shop)

def create_admin(db: Session, email: str, password: str, shop_id: str, role: str = "admin") -> Admin:
    if not shop_crud.get_shop(db, shop_id):
        raise ValueError(f"Shop '{shop_id}' does not exist")
    if admin_crud.get_admin_by_email(db, email):
        raise ValueError(f"Admin '{email}' already exists")
    return admin_crud.create_admin(db, email, hash_password(password), shop_id, role)

def set_ar_model(db: Session, product_id: str, ar_model: str):
    if not product_crud.set_ar_model(db, product_id, ar_model or None):
        raise ValueError(f"Product '{product_id}' does not exist")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="python -m app.init_db", description="Shop catalog provisioning")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init", help="Create tables (and seed a demo shop outside production)")

    shop_parser = sub.add_parser("create-shop", help="Create a shop (tenant)")
    shop_parser.add_argument("--id", required=True)
    shop_parser.add_argument("--name", required=True)
    shop_parser.add_argument("--tagline")
    shop_parser.add_argument("--logo-url")
    shop_parser.add_argument("--phone")
    shop_parser.add_argument("--address")

    admin_parser = sub.add_parser("create-admin", help="Create an admin for a shop")
    admin_parser.add_argument("--email", required=True)
    admin_parser.add_argument("--password", required=True)
    admin_parser.add_argument("--shop-id", required=True)
    admin_parser.add_argument("--role", default="admin")

    ar_parser = sub.add_parser("set-ar-model", help="Attach an AR model to a product")
    ar_parser.add_argument("--product-id", required=True)
    ar_parser.add_argument("--ar-model", required=True)
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    engine = create_db_engine(settings.database_url)
    Base.metadata.create_all(bind=engine)
    db = create_session_factory(engine)()
    try:
        if args.command == "init":
            print("✅ Tables created")
            if not settings.is_production:
                seed(db)
                print("✅ Seed data added")
        elif args.command == "create-shop":
            shop = create_shop(db, ShopCreate(
                id=args.id,
                name=args.name,
                tagline=args.tagline,
                logo_url=args.logo_url,
                phone=args.phone,
                address=args.address,
            ))
            print(f"✅ Shop created: {shop.id}")
        elif args.command == "create-admin":
            admin = create_admin(db, args.email, args.password, args.shop_id, args.role)
            print(f"✅ Admin created: {admin.email} (shop {admin.shop_id})")
        elif args.command == "set-ar-model":
            set_ar_model(db, args.product_id, args.ar_model)
            print(f"✅ AR model set for product {args.product_id}")
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    finally:
        db.close()
        engine.dispose()
    return 0

if __name__ == "__main__":
    sys.exit(main())
