import os
import tempfile

# app.main builds a module-level app from the environment on import
os.environ.setdefault("ENV", "test")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("PUBLIC_DIR", tempfile.mkdtemp(prefix="shop-catalog-public-"))

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.database import Base
from app.db.models import Shop
from app.init_db import create_admin
from app.main import create_app

JWT_SECRET = "test-secret"


@pytest.fixture
def settings(tmp_path):
    public_dir = tmp_path / "public"
    return Settings(
        env="test",
        database_url="sqlite://",
        jwt_secret=JWT_SECRET,
        public_dir=str(public_dir),
        upload_dir=str(public_dir / "uploads"),
        public_base_url="https://shop.example.com",
        qr_target_url="https://shop.example.com/",
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    Base.metadata.create_all(bind=app.state.engine)
    yield app
    app.state.engine.dispose()


@pytest.fixture
def db(app):
    session = app.state.SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def shops(db):
    db.add_all([
        Shop(id="shop-a", name="Shop A", tagline="Chairs and more", phone="09876543210"),
        Shop(id="shop-b", name="Shop B", phone="+44 20 7946 0958"),
    ])
    db.commit()


@pytest.fixture
def admins(db, shops):
    create_admin(db, "a@example.com", "secret-a", "shop-a")
    create_admin(db, "b@example.com", "secret-b", "shop-b")


def _login(client, email, password):
    response = client.post("/api/admin/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


@pytest.fixture
def token_a(client, admins):
    return _login(client, "a@example.com", "secret-a")


@pytest.fixture
def token_b(client, admins):
    return _login(client, "b@example.com", "secret-b")


@pytest.fixture
def make_images():
    def _make(count, content_type="image/png"):
        return [
            ("images", (f"photo #{i}.png", b"\x89PNG\r\n\x1a\nnot-really-a-png", content_type))
            for i in range(count)
        ]
    return _make


@pytest.fixture
def create_product(client, make_images):
    def _create(token, category="Chairs", description="Oak chair", images=1):
        response = client.post(
            "/api/admin/product",
            data={"category": category, "description": description},
            files=make_images(images),
            headers={"Authorization": token},
        )
        assert response.status_code == 200, response.text
        return response.json()["id"]
    return _create
