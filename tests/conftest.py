"""
Pytest configuration and fixtures
Every test gets its own file-backed SQLite database.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("PROVISION_ON_STARTUP", "false")

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from database.init import Base, get_db, get_engine, make_engine
from database.models.admin_model import Admin  # noqa: F401  registers the admins table
from database.provisioner import SchemaProvisioner
from main import app
from schemas.occupant_schema import Occupant
from schemas.payment_schema import Payment
from schemas.room_schema import Room

TENANT_ID = 7


@pytest.fixture
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'pg_manager.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def provisioner(engine) -> SchemaProvisioner:
    return SchemaProvisioner(engine, lock_timeout=0)


@pytest.fixture
def tenant_id(provisioner) -> int:
    """Tenant 7 with all of its tables in place"""
    provisioner.provision_tenant(TENANT_ID)
    return TENANT_ID


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    yield session
    session.close()


@pytest.fixture
def client(engine, db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_engine] = lambda: engine
    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def admin_credentials() -> dict:
    return {
        "name": "Meera Rao",
        "email": "meera@sunrisepg.in",
        "password": "Sunrise@123",
        "phone": "9876543210",
        "hostel_name": "Sunrise PG",
    }


@pytest.fixture
def auth_headers(client, admin_credentials) -> dict:
    client.post("/admin/register", json=admin_credentials)
    response = client.post(
        "/admin/login",
        json={"email": admin_credentials["email"], "password": admin_credentials["password"]},
    )
    token = response.json()["data"]["access_token"]
    return {"Authorization": f"Bearer {token}"}


def make_occupant(**overrides) -> Occupant:
    values = dict(
        name="Asha",
        phone="9000000001",
        email="asha@example.com",
        room_number="R1",
        address="12 MG Road, Pune",
        joining_date=date(2024, 6, 1),
    )
    values.update(overrides)
    return Occupant(**values)


def make_room(**overrides) -> Room:
    values = dict(room_number="R1", capacity=3, rent=6500.0)
    values.update(overrides)
    return Room(**values)


def make_payment(**overrides) -> Payment:
    values = dict(student="Asha", amount=5000.0, payment_date=date(2024, 6, 5), method="UPI")
    values.update(overrides)
    return Payment(**values)
