"""
Pytest fixtures and configuration for Kitchen Control Backend tests

This file provides shared fixtures that can be used across all test modules.
Tests run against an in-memory SQLite database.

Author: TM3
"""
import os

# Point the application at an in-memory database BEFORE importing it
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from kitchen_control import models  # noqa: F401  (registers tables on Base)
from kitchen_control.core.database import Base, SessionLocal, engine
from kitchen_control.domain.order import OrderRequest
from kitchen_control.main import app


@pytest.fixture(scope="function")
def reset_database():
    """
    Recreates every table so each test starts from an empty database

    Scope: function (fresh schema per test)
    """
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(reset_database):
    """
    Provides a SQLAlchemy session on the empty test database

    Automatically closes the session after the test
    """
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(reset_database):
    """
    TestClient for the FastAPI app (runs the lifespan on enter)
    """
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def fixed_now():
    """A deterministic creation timestamp"""
    return datetime(2025, 3, 14, 9, 30, 15, 123456)


@pytest.fixture
def sample_order_data():
    """
    Provides a sample order creation body (JSON field names)
    """
    return {
        "storeId": 5,
        "orderDetails": [
            {"productId": 10, "quantity": 2.5},
            {"productId": 11, "quantity": 4.0},
        ]
    }


@pytest.fixture
def sample_order_request(sample_order_data):
    """
    Provides the sample body parsed into an OrderRequest
    """
    return OrderRequest.model_validate(sample_order_data)
