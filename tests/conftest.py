# tests/conftest.py
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import storage_api.models  # noqa: F401  registers tables on Base.metadata
from storage_api.database import Base, build_engine, get_db
from storage_api.main import create_app
from storage_api.models import ProductTable, WarehouseTable


@pytest.fixture
def engine():
    """In-memory SQLite shared by every session of a test."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def app(session_factory):
    app = create_app()

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def seed_warehouses(db_session):
    """Two warehouses; the second one holds no products."""
    rows = [
        WarehouseTable(name="warehouse 1", address="address 1", telephone="telephone 1", capacity=100),
        WarehouseTable(name="warehouse 2", address="address 2", telephone="telephone 2", capacity=200),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return [r.id for r in rows]


@pytest.fixture
def seed_products(db_session, seed_warehouses):
    """Two products stored in the first warehouse."""
    rows = [
        ProductTable(
            name="product 1", quantity=10, code_value="code 1", is_published=True,
            expiration=date(2021, 1, 1), price=10.0, warehouse_id=seed_warehouses[0],
        ),
        ProductTable(
            name="product 2", quantity=20, code_value="code 2", is_published=True,
            expiration=date(2021, 1, 2), price=20.0, warehouse_id=seed_warehouses[0],
        ),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return [r.id for r in rows]
