"""
Shared pytest fixtures — fresh receipt stores + FastAPI TestClient.
"""
import copy

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.database import Base, make_session_factory
from app.main import app
from app.models import ScoredReceiptModel  # noqa: F401  — register model
from app.pipeline.store import MemoryReceiptStore, SqlReceiptStore
from app.routers.receipts import get_store
from app.schemas import Receipt

# StaticPool ensures all connections share the same in-memory database
_ENGINE = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@pytest.fixture()
def memory_store():
    return MemoryReceiptStore()


@pytest.fixture()
def sql_store():
    Base.metadata.create_all(bind=_ENGINE)
    yield SqlReceiptStore(make_session_factory(_ENGINE))
    Base.metadata.drop_all(bind=_ENGINE)


@pytest.fixture(params=["memory", "sql"])
def store(request):
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture()
def client(memory_store):
    app.dependency_overrides[get_store] = lambda: memory_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Sample receipts
# ---------------------------------------------------------------------------

TARGET_PAYLOAD = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_PAYLOAD = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [{"shortDescription": "Gatorade", "price": "2.25"}] * 4,
    "total": "9.00",
}

AFTERNOON_PAYLOAD = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "14:30",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
    ],
    "total": "18.74",
}


@pytest.fixture()
def target_receipt():
    return Receipt.model_validate(TARGET_PAYLOAD)


@pytest.fixture()
def corner_market_receipt():
    return Receipt.model_validate(CORNER_MARKET_PAYLOAD)


@pytest.fixture()
def afternoon_receipt():
    return Receipt.model_validate(AFTERNOON_PAYLOAD)


@pytest.fixture()
def target_payload():
    return copy.deepcopy(TARGET_PAYLOAD)


@pytest.fixture()
def corner_market_payload():
    return copy.deepcopy(CORNER_MARKET_PAYLOAD)
